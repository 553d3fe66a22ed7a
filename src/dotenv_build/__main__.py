"""Entrypoint: python -m dotenv_build"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError as SettingsError

from dotenv_build.application.dto.output_config import OutputConfig
from dotenv_build.application.exceptions import AppError
from dotenv_build.application.ports.emitter import Emitter
from dotenv_build.config import LOG_LEVELS, Settings, get_settings
from dotenv_build.domain.value_objects.enums import OutputFormat
from dotenv_build.infrastructure.emitters.json_report import JsonEmitter
from dotenv_build.infrastructure.emitters.shell import ShellEmitter
from dotenv_build.services.output_service import output_multiple

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotenv_build",
        description="Find a KEY=VALUE definition file in this or a parent directory and print its entries.",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="files",
        action="append",
        default=None,
        help=f"File name to look for; repeat to load several in order (default: {settings.FILENAME}).",
    )
    parser.add_argument(
        "--no-recursive",
        dest="recursive",
        action="store_false",
        default=settings.RECURSIVE_SEARCH,
        help="Only look in the current directory.",
    )
    parser.add_argument(
        "--fail-if-missing",
        action="store_true",
        default=settings.FAIL_IF_MISSING,
        help="Exit with an error when a file cannot be found.",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=settings.OUTPUT_FORMAT,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.LOG_LEVEL,
    )
    return parser


def make_emitter(fmt: str, out: TextIO) -> Emitter:
    if fmt == OutputFormat.JSON:
        return JsonEmitter(out)
    return ShellEmitter(out)


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        settings = get_settings()
    except SettingsError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    args = build_parser(settings).parse_args(argv)
    logging.getLogger().setLevel(args.log_level)

    configs = [
        OutputConfig(
            filename=Path(filename),
            recursive_search=args.recursive,
            fail_if_missing=args.fail_if_missing,
        )
        for filename in (args.files or [settings.FILENAME])
    ]
    try:
        output_multiple(configs, make_emitter(args.format, out or sys.stdout))
    except AppError as exc:
        logger.error("%s", exc.detail)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
