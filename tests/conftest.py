"""Shared test fixtures."""
from __future__ import annotations

import io
import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from dotenv_build.infrastructure.parsing.line_parser import iter_entries


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("DOTENV_BUILD_"):
            monkeypatch.delenv(name)


@pytest.fixture
def unique_name() -> str:
    """A file name that cannot exist anywhere above tmp_path."""
    return f".env.{uuid.uuid4().hex}"


@pytest.fixture
def deep_dir(tmp_path) -> Path:
    """tmp_path/a/b/c, returned as the deepest directory."""
    path = tmp_path / "a" / "b" / "c"
    path.mkdir(parents=True)
    return path


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


def parse_bytes(data: bytes) -> list[tuple[str, str]]:
    return [entry.as_tuple() for entry in iter_entries(io.BytesIO(data))]


def parse_text(text: str) -> list[tuple[str, str]]:
    return parse_bytes(text.encode("utf-8"))


@dataclass
class FakeEmitter:
    """In-memory emitter for service tests."""
    entries: list[tuple[str, str]] = field(default_factory=list)
    sources: list[Path] = field(default_factory=list)
    aborted: int = 0

    def emit(self, key: str, value: str) -> None:
        self.entries.append((key, value))

    def finish(self, source: Path) -> None:
        self.sources.append(source)

    def abort(self) -> None:
        self.aborted += 1
