from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotenv_build.config import Settings


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Which file to load and how strict to be about it."""

    filename: Path = Path(".env")
    recursive_search: bool = True
    fail_if_missing: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> OutputConfig:
        return cls(
            filename=Path(settings.FILENAME),
            recursive_search=settings.RECURSIVE_SEARCH,
            fail_if_missing=settings.FAIL_IF_MISSING,
        )
