from __future__ import annotations

import logging
import os
from collections.abc import Iterable, MutableMapping
from pathlib import Path

from dotenv_build.application.dto.output_config import OutputConfig
from dotenv_build.application.exceptions import AppError, NotFoundError
from dotenv_build.application.ports.emitter import Emitter
from dotenv_build.config import get_settings
from dotenv_build.infrastructure.emitters.environ import EnvironEmitter
from dotenv_build.services.find_service import find

logger = logging.getLogger(__name__)


def output(
    config: OutputConfig,
    emitter: Emitter,
    cwd: Path | None = None,
) -> int | None:
    """Feed every entry of the located file to ``emitter``.

    Returns the number of entries emitted, or ``None`` when the file is
    missing and ``config.fail_if_missing`` is off.
    """
    count = 0
    try:
        with find(config, cwd) as (path, entries):
            for entry in entries:
                emitter.emit(*entry.as_tuple())
                count += 1
    except NotFoundError:
        if config.fail_if_missing:
            raise
        logger.debug("%s file not found, skipping", config.filename)
        return None
    except AppError:
        emitter.abort()
        logger.debug("Aborted %s after %d entries", config.filename, count)
        raise

    emitter.finish(path)
    logger.debug("Emitted %d entries from %s", count, path)
    return count


def output_multiple(
    configs: Iterable[OutputConfig],
    emitter: Emitter,
    cwd: Path | None = None,
) -> list[int | None]:
    return [output(config, emitter, cwd) for config in configs]


def load_env(
    config: OutputConfig | None = None,
    *,
    environ: MutableMapping[str, str] | None = None,
    override: bool = False,
    cwd: Path | None = None,
) -> Path | None:
    """Apply the located file to ``environ`` (``os.environ`` by default)."""
    emitter = EnvironEmitter(os.environ if environ is None else environ, override=override)
    output(config or OutputConfig.from_settings(get_settings()), emitter, cwd)
    return emitter.sources[0] if emitter.sources else None
