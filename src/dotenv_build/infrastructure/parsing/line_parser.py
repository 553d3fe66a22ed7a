"""Line-oriented parser for ``KEY=VALUE`` definition files.

Supported syntax::

    # comment
    KEY=value            # trailing comment after whitespace
    export KEY=value
    KEY="double \"quoted\"\tvalue"
    KEY='single quoted, taken literally'

Parsing is lazy: ``iter_entries`` reads one line per step and stops for good
at the first malformed line by raising ``ParseError``.
"""
from __future__ import annotations

import re
from collections.abc import Iterator
from typing import BinaryIO

from dotenv_build.application.exceptions import IoError, ParseError
from dotenv_build.domain.entities.entry import ParsedEntry

KEY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
EXPORT_RE = re.compile(r"export\s+")

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "'": "'",
    "$": "$",
}


def iter_entries(stream: BinaryIO) -> Iterator[ParsedEntry]:
    """Yield entries from ``stream`` in file order.

    The stream is not closed here; its owner is responsible for that.
    Advancing after the stream was closed raises ``IoError``.
    """
    line_number = 0
    while True:
        try:
            raw = stream.readline()
        except OSError as exc:
            raise IoError.from_os_error(exc) from exc
        except ValueError as exc:
            # Closed stream, e.g. advanced after its owner released it.
            raise IoError(str(exc)) from exc
        if not raw:
            return
        line_number += 1

        try:
            line = raw.decode("utf-8-sig" if line_number == 1 else "utf-8")
        except UnicodeDecodeError as exc:
            text = _strip_terminator(raw.decode("utf-8", errors="replace"))
            raise ParseError(text, f"invalid UTF-8 ({exc.reason})", line_number) from exc

        entry = parse_line(_strip_terminator(line), line_number)
        if entry is not None:
            yield entry


def parse_line(line: str, line_number: int | None = None) -> ParsedEntry | None:
    """Parse one line without its terminator.

    Returns ``None`` for blank and comment lines.
    """
    body = line.lstrip()
    if not body or body.startswith("#"):
        return None

    match = EXPORT_RE.match(body)
    if match:
        body = body[match.end():]

    key, sep, rest = body.partition("=")
    if not sep:
        raise ParseError(line, "missing '=' separator", line_number)

    key = key.strip()
    if not KEY_RE.fullmatch(key):
        raise ParseError(line, f"invalid key {key!r}", line_number)

    return ParsedEntry(key=key, value=_decode_value(rest.strip(), line, line_number))


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _decode_value(raw: str, line: str, line_number: int | None) -> str:
    if not raw:
        return ""
    if raw[0] == '"':
        value, end = _read_double_quoted(raw, line, line_number)
    elif raw[0] == "'":
        end = raw.find("'", 1)
        if end == -1:
            raise ParseError(line, "unterminated single quote", line_number)
        value = raw[1:end]
    else:
        return _strip_inline_comment(raw)

    tail = raw[end + 1:].lstrip()
    if tail and not tail.startswith("#"):
        raise ParseError(line, "unexpected characters after closing quote", line_number)
    return value


def _read_double_quoted(raw: str, line: str, line_number: int | None) -> tuple[str, int]:
    """Return the unescaped contents and the index of the closing quote."""
    out: list[str] = []
    i = 1
    while i < len(raw):
        ch = raw[i]
        if ch == '"':
            return "".join(out), i
        if ch == "\\" and i + 1 < len(raw):
            nxt = raw[i + 1]
            # Unknown escapes are kept verbatim.
            out.append(_ESCAPES.get(nxt, "\\" + nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    raise ParseError(line, "unterminated double quote", line_number)


def _strip_inline_comment(raw: str) -> str:
    if raw.startswith("#"):
        return ""
    for i in range(1, len(raw)):
        if raw[i] == "#" and raw[i - 1].isspace():
            return raw[:i].rstrip()
    return raw
