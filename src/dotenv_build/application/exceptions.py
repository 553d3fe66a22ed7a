from __future__ import annotations

from dotenv_build.domain.value_objects.enums import ErrorKind


class AppError(Exception):
    """Base application error."""

    kind: ErrorKind = ErrorKind.APPLICATION

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)

    @property
    def is_not_found(self) -> bool:
        return self.kind == ErrorKind.NOT_FOUND


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND


class IoError(AppError):
    """Filesystem failure other than the file simply not existing."""

    kind = ErrorKind.IO

    def __init__(self, detail: str = "", os_error: OSError | None = None) -> None:
        self.os_error = os_error
        super().__init__(detail)

    @classmethod
    def from_os_error(cls, exc: OSError) -> IoError:
        return cls(str(exc), os_error=exc)


class ParseError(AppError):
    kind = ErrorKind.PARSE

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Error parsing {where}: {reason}: {line!r}")


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION
