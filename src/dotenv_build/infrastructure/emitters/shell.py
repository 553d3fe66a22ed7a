from __future__ import annotations

import shlex
from pathlib import Path
from typing import TextIO


class ShellEmitter:
    """Writes ``export KEY=value`` lines that a POSIX shell can ``eval``."""

    def __init__(self, out: TextIO) -> None:
        self._out = out

    def emit(self, key: str, value: str) -> None:
        self._out.write(f"export {key}={shlex.quote(value)}\n")

    def finish(self, source: Path) -> None:
        self._out.write(f"# source: {source}\n")

    def abort(self) -> None:
        pass
