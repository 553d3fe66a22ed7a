"""JSON report of the loaded entries, one document per source file."""
from __future__ import annotations

from pathlib import Path
from typing import TextIO

from pydantic import BaseModel


class EntryReport(BaseModel):
    key: str
    value: str


class SourceReport(BaseModel):
    source: str
    entries: list[EntryReport] = []


class JsonEmitter:
    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._entries: list[EntryReport] = []

    def emit(self, key: str, value: str) -> None:
        self._entries.append(EntryReport(key=key, value=value))

    def finish(self, source: Path) -> None:
        report = SourceReport(source=str(source), entries=self._entries)
        self._out.write(report.model_dump_json() + "\n")
        self._entries = []

    def abort(self) -> None:
        self._entries = []
