from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv_build.application.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Where to start looking, what to look for and whether to climb."""

    start_directory: Path
    filename: Path
    recursive: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_directory", Path(self.start_directory))
        object.__setattr__(self, "filename", Path(self.filename))
        if self.filename.is_absolute():
            raise ValidationError(f"filename must be relative, got {str(self.filename)!r}")
        if not self.filename.parts:
            raise ValidationError("filename must not be empty")
