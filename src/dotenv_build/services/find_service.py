from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from dotenv_build.application.dto.output_config import OutputConfig
from dotenv_build.application.exceptions import IoError
from dotenv_build.domain.entities.entry import ParsedEntry
from dotenv_build.domain.entities.search_request import SearchRequest
from dotenv_build.infrastructure.fs.locator import locate
from dotenv_build.infrastructure.parsing.line_parser import iter_entries


@contextmanager
def find(
    config: OutputConfig,
    cwd: Path | None = None,
) -> Iterator[tuple[Path, Iterator[ParsedEntry]]]:
    """Locate ``config.filename`` from ``cwd`` and open it for parsing.

    The file handle lives exactly as long as the ``with`` block.
    """
    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError as exc:
            raise IoError.from_os_error(exc) from exc

    path = locate(
        SearchRequest(
            start_directory=cwd,
            filename=config.filename,
            recursive=config.recursive_search,
        )
    )
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise IoError.from_os_error(exc) from exc

    with handle:
        yield path, iter_entries(handle)
