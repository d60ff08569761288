"""
pureconf — flat key/value sources.

File: src/pureconf/sources/flat.py
Last updated: 2026-10-19

Purpose
- Serve dotted-key string maps (properties files, CLI arguments, plain dicts).

What should be included in this file
- ``FlatSource`` with text coercion and numeric-index list discovery.
- ``from_mapping`` and ``from_args`` constructors.

Functional requirements
- List element ids are the numeric segments directly under ``<key>.``,
  de-duplicated and sorted numerically.
- Primitive list elements are scalar reads keyed by the element index.
- ``-key value`` sets a value; ``--flag`` sets ``true``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pureconf.constants import KEY_SEPARATOR
from pureconf.errors import SourceError
from pureconf.program.expr import ElementKind, scalar_read
from pureconf.sources.base import Source, parse_boolean, parse_integer

if TYPE_CHECKING:
    from pureconf.program.expr import Expr
    from pureconf.program.program import Program


class FlatSource(Source):
    """Immutable snapshot of flat dotted keys mapped to text values."""

    def __init__(self, entries: Mapping[str, object], *, origin: str = "<mapping>") -> None:
        normalized: dict[str, str] = {}
        for key, value in entries.items():
            if not isinstance(key, str):
                raise SourceError(f"{origin}: key must be a string, got {type(key).__name__}")
            normalized[key] = _as_text(value)
        self._entries: Mapping[str, str] = MappingProxyType(dict(sorted(normalized.items())))
        self.origin = origin

    def get_string(self, path: str) -> str | None:
        return self._entries.get(path)

    def get_integer(self, path: str) -> int | None:
        text = self._entries.get(path)
        if text is None:
            return None
        return parse_integer(text, path)

    def get_boolean(self, path: str) -> bool | None:
        text = self._entries.get(path)
        if text is None:
            return None
        return parse_boolean(text, path)

    def get_iterable_primitive(self, path: str, kind: ElementKind) -> Sequence[Expr] | None:
        element_ids = self._element_ids(path)
        if not element_ids:
            return None
        return tuple(scalar_read(kind, element_id) for element_id in element_ids)

    def get_iterable_nested(self, path: str, item: Program[Any]) -> Sequence[str] | None:
        element_ids = self._element_ids(path)
        if not element_ids:
            return None
        return element_ids

    def keys(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def _element_ids(self, path: str) -> tuple[str, ...]:
        prefix = f"{path}{KEY_SEPARATOR}"
        found: set[str] = set()
        for key in self._entries:
            if not key.startswith(prefix):
                continue
            segment = key[len(prefix) :].split(KEY_SEPARATOR, 1)[0]
            if segment.isascii() and segment.isdigit():
                found.add(segment)
        return tuple(sorted(found, key=lambda element_id: (int(element_id), element_id)))

    def __repr__(self) -> str:
        return f"FlatSource(origin={self.origin!r}, keys={len(self._entries)})"


def _as_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def from_mapping(entries: Mapping[str, object]) -> FlatSource:
    return FlatSource(entries)


def parse_args(argv: Sequence[str]) -> dict[str, str]:
    """Flatten ``-key value`` and ``--flag`` arguments into dotted keys."""

    parsed: dict[str, str] = {}
    index = 0
    while index < len(argv):
        current = argv[index]
        if not current.startswith("-"):
            raise SourceError(f"invalid param: {current}")
        if current.startswith("--"):
            name = current[2:]
            if not name:
                raise SourceError(f"not a valid argument: {current}")
            parsed[name] = "true"
        else:
            name = current[1:]
            if not name:
                raise SourceError(f"not a valid argument: {current}")
            if index + 1 >= len(argv):
                raise SourceError(f"expected a value after: {current}")
            index += 1
            parsed[name] = argv[index]
        index += 1
    return parsed


def from_args(argv: Sequence[str]) -> FlatSource:
    return FlatSource(parse_args(argv), origin="<args>")


__all__ = ["FlatSource", "from_args", "from_mapping", "parse_args"]
