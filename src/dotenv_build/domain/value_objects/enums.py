from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    APPLICATION = "application"
    NOT_FOUND = "not_found"
    IO = "io"
    PARSE = "parse"
    VALIDATION = "validation"


class OutputFormat(StrEnum):
    SHELL = "shell"
    JSON = "json"
