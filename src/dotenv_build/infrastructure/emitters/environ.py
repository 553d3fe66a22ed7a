from __future__ import annotations

from collections.abc import MutableMapping
from pathlib import Path


class EnvironEmitter:
    """Applies entries to an environment mapping such as ``os.environ``.

    Variables already present before loading started are left alone unless
    ``override`` is set. Within the loaded files the last definition wins.
    """

    def __init__(self, environ: MutableMapping[str, str], *, override: bool = False) -> None:
        self._environ = environ
        self._override = override
        self._preexisting = frozenset(environ)
        self.sources: list[Path] = []

    def emit(self, key: str, value: str) -> None:
        if not self._override and key in self._preexisting:
            return
        self._environ[key] = value

    def finish(self, source: Path) -> None:
        self.sources.append(source)

    def abort(self) -> None:
        pass
