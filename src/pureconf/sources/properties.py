"""Java-style ``.properties`` parsing into a ``FlatSource``.

Supported syntax::

    # comment
    ! comment
    server.host=localhost
    server.port: 8080
    server.active true
    greeting = hello \\
               world

Keys end at the first unescaped ``=``, ``:`` or whitespace. Escapes ``\\t``,
``\\n``, ``\\r``, ``\\f``, ``\\uXXXX`` are decoded; any other escaped character
stands for itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pureconf.errors import SourceError
from pureconf.observability.logging import get_logger
from pureconf.sources.flat import FlatSource

logger = get_logger(__name__)

_COMMENT_MARKERS: Final[tuple[str, ...]] = ("#", "!")
_SEPARATORS: Final[frozenset[str]] = frozenset({"=", ":"})
_WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t", "\f"})
_ESCAPES: Final[dict[str, str]] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text; later duplicate keys override earlier ones."""

    entries: dict[str, str] = {}
    for logical in _logical_lines(text):
        key, value = _split_entry(logical)
        entries[_unescape(key)] = _unescape(value)
    return entries


def from_properties(path: str | Path) -> FlatSource:
    resolved = Path(path).expanduser()
    try:
        text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceError(f"unable to read properties file {resolved}: {exc}") from exc
    try:
        entries = parse_properties(text)
    except ValueError as exc:
        raise SourceError(f"invalid properties in {resolved}: {exc}") from exc
    logger.debug(
        "source loaded", source=str(resolved), source_format="properties", count=len(entries)
    )
    return FlatSource(entries, origin=str(resolved))


def _logical_lines(text: str) -> list[str]:
    lines: list[str] = []
    pending: str | None = None
    for raw in text.splitlines():
        stripped = raw.lstrip(" \t\f")
        if pending is None:
            if not stripped or stripped.startswith(_COMMENT_MARKERS):
                continue
            current = stripped
        else:
            current = pending + stripped
        if _continues(current):
            pending = current[:-1]
            continue
        pending = None
        lines.append(current)
    if pending is not None:
        lines.append(pending)
    return lines


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]

    while index < length and line[index] in _WHITESPACE:
        index += 1
    if index < length and line[index] in _SEPARATORS:
        index += 1
        while index < length and line[index] in _WHITESPACE:
            index += 1
    return key, line[index:]


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text
    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\" or index + 1 >= length:
            out.append(char)
            index += 1
            continue
        marker = text[index + 1]
        if marker == "u":
            digits = text[index + 2 : index + 6]
            if len(digits) != 4:
                raise ValueError(f"malformed \\uXXXX escape: {text[index:index + 6]!r}")
            try:
                out.append(chr(int(digits, 16)))
            except ValueError as exc:
                raise ValueError(f"malformed \\uXXXX escape: \\u{digits}") from exc
            index += 6
            continue
        out.append(_ESCAPES.get(marker, marker))
        index += 2
    return "".join(out)


__all__ = ["from_properties", "parse_properties"]
