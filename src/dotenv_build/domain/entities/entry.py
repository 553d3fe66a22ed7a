from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    key: str
    value: str

    def as_tuple(self) -> tuple[str, str]:
        return self.key, self.value
