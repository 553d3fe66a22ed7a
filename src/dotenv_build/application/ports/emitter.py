from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Emitter(Protocol):
    def emit(self, key: str, value: str) -> None: ...

    def finish(self, source: Path) -> None: ...

    def abort(self) -> None:
        """Drop anything buffered for a source that failed part-way."""
        ...
