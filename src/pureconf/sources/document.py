"""
pureconf — hierarchical document sources.

File: src/pureconf/sources/document.py
Last updated: 2026-10-19

Purpose
- Serve nested mappings and arrays loaded from TOML, YAML, or JSON documents.

What should be included in this file
- ``DocumentSource`` resolving dotted paths through tables and arrays.
- ``from_toml`` (``tomllib``), ``from_yaml`` (PyYAML ``safe_load``), ``from_json``.

Functional requirements
- Numeric path segments index arrays: ``list.0.name``.
- Scalars accept native values and parseable text; containers at a scalar
  path are malformed.
- Arrays of scalars yield one index read per element, so each bad element
  fails on its own path; arrays of tables yield ids ``0..n-1``; an
  explicitly empty array is a present, empty list.
- ``null`` values count as missing.
"""

from __future__ import annotations

import copy
import json
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import yaml

from pureconf.constants import KEY_SEPARATOR
from pureconf.errors import MalformedValueError, SourceError
from pureconf.observability.logging import get_logger
from pureconf.program.expr import ElementKind, scalar_read
from pureconf.sources.base import Source, parse_boolean, parse_integer

if TYPE_CHECKING:
    from pureconf.program.expr import Expr
    from pureconf.program.program import Program

logger = get_logger(__name__)

_MISSING: Final[object] = object()


class DocumentSource(Source):
    """Read-only view over a parsed hierarchical document."""

    def __init__(self, document: Mapping[str, Any], *, origin: str = "<document>") -> None:
        if not isinstance(document, Mapping):
            raise SourceError(f"{origin}: document root must be a table/mapping")
        self._document: Mapping[str, Any] = copy.deepcopy(dict(document))
        self.origin = origin

    def get_string(self, path: str) -> str | None:
        value = self._lookup(path)
        if value is None:
            return None
        return _coerce(value, ElementKind.STRING, path)  # type: ignore[return-value]

    def get_integer(self, path: str) -> int | None:
        value = self._lookup(path)
        if value is None:
            return None
        return _coerce(value, ElementKind.INTEGER, path)  # type: ignore[return-value]

    def get_boolean(self, path: str) -> bool | None:
        value = self._lookup(path)
        if value is None:
            return None
        return _coerce(value, ElementKind.BOOLEAN, path)  # type: ignore[return-value]

    def get_iterable_primitive(self, path: str, kind: ElementKind) -> Sequence[Expr] | None:
        value = self._lookup(path)
        if value is None:
            return None
        if not isinstance(value, list):
            raise MalformedValueError(path, f"{kind.type_name}[]", value)
        return tuple(scalar_read(kind, str(index)) for index in range(len(value)))

    def get_iterable_nested(self, path: str, item: Program[Any]) -> Sequence[str] | None:
        value = self._lookup(path)
        if value is None:
            return None
        if not isinstance(value, list):
            raise MalformedValueError(path, "array of tables", value)
        return tuple(str(index) for index in range(len(value)))

    def keys(self) -> tuple[str, ...]:
        return tuple(sorted(_flatten(self._document, "")))

    def _lookup(self, path: str) -> Any:
        current: Any = self._document
        for segment in path.split(KEY_SEPARATOR):
            if isinstance(current, Mapping):
                current = current.get(segment, _MISSING)
            elif isinstance(current, list):
                if not (segment.isascii() and segment.isdigit()):
                    return None
                index = int(segment)
                if index >= len(current):
                    return None
                current = current[index]
            else:
                return None
            if current is _MISSING or current is None:
                return None
        return current

    def __repr__(self) -> str:
        return f"DocumentSource(origin={self.origin!r})"


def _coerce(value: Any, kind: ElementKind, path: str) -> str | int | bool:
    if value is None or isinstance(value, (Mapping, list)):
        raise MalformedValueError(path, kind.type_name, value)
    if kind is ElementKind.STRING:
        if isinstance(value, bool):
            return "true" if value else "false"
        return value if isinstance(value, str) else str(value)
    if kind is ElementKind.INTEGER:
        if isinstance(value, bool):
            raise MalformedValueError(path, kind.type_name, value)
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            return parse_integer(value, path)
        raise MalformedValueError(path, kind.type_name, value)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_boolean(value, path)
    raise MalformedValueError(path, kind.type_name, value)


def _flatten(value: Any, prefix: str) -> list[str]:
    if isinstance(value, Mapping):
        items = [(str(key), item) for key, item in value.items()]
    elif isinstance(value, list):
        items = [(str(index), item) for index, item in enumerate(value)]
    else:
        return [prefix] if prefix else []
    keys: list[str] = []
    for segment, item in items:
        if item is None:
            continue
        child = f"{prefix}{KEY_SEPARATOR}{segment}" if prefix else segment
        keys.extend(_flatten(item, child))
    return keys


def from_toml(path: str | Path) -> DocumentSource:
    resolved = Path(path).expanduser()
    try:
        with resolved.open("rb") as handle:
            parsed = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SourceError(f"invalid TOML in {resolved}: {exc}") from exc
    except OSError as exc:
        raise SourceError(f"unable to read TOML file {resolved}: {exc}") from exc
    return _document_source(parsed, resolved, "toml")


def from_yaml(path: str | Path) -> DocumentSource:
    resolved = Path(path).expanduser()
    try:
        with resolved.open("r", encoding="utf-8") as handle:
            parsed = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise SourceError(f"invalid YAML in {resolved}: {exc}") from exc
    except OSError as exc:
        raise SourceError(f"unable to read YAML file {resolved}: {exc}") from exc
    return _document_source({} if parsed is None else parsed, resolved, "yaml")


def from_json(path: str | Path) -> DocumentSource:
    resolved = Path(path).expanduser()
    try:
        with resolved.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except json.JSONDecodeError as exc:
        raise SourceError(f"invalid JSON in {resolved}: {exc}") from exc
    except OSError as exc:
        raise SourceError(f"unable to read JSON file {resolved}: {exc}") from exc
    return _document_source(parsed, resolved, "json")


def _document_source(parsed: object, path: Path, source_format: str) -> DocumentSource:
    if not isinstance(parsed, Mapping):
        raise SourceError(f"document root must be a table/mapping: {path}")
    logger.debug(
        "source loaded", source=str(path), source_format=source_format, count=len(parsed)
    )
    return DocumentSource(parsed, origin=str(path))


__all__ = ["DocumentSource", "from_json", "from_toml", "from_yaml"]
