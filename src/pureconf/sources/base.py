"""
pureconf — source capability contract.

File: src/pureconf/sources/base.py
Last updated: 2026-10-19

Purpose
- Define the lookup surface interpreters use to resolve full dotted keys.

What should be included in this file
- Abstract ``Source`` with scalar getters, list discovery, and key listing.
- Shared scalar coercion for text values.

Functional requirements
- Getters return ``None`` when a key is absent.
- Present but unparsable values raise ``MalformedValueError``.
- List discovery returns ``None`` when the list key is absent.
"""

from __future__ import annotations

import abc
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Final

from pureconf.constants import BOOLEAN_FALSE, BOOLEAN_TRUE
from pureconf.errors import MalformedValueError
from pureconf.program.expr import ElementKind

if TYPE_CHECKING:
    from pureconf.program.expr import Expr
    from pureconf.program.program import Program

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d+$")


class Source(abc.ABC):
    """Read-only key/value capability consumed by the interpreters."""

    @abc.abstractmethod
    def get_string(self, path: str) -> str | None: ...

    @abc.abstractmethod
    def get_integer(self, path: str) -> int | None: ...

    @abc.abstractmethod
    def get_boolean(self, path: str) -> bool | None: ...

    @abc.abstractmethod
    def get_iterable_primitive(self, path: str, kind: ElementKind) -> Sequence[Expr] | None:
        """Return one expression per element of the scalar list at ``path``.

        Elements are either ``Pure`` literals or scalar reads keyed by the
        element index, to be resolved relative to ``path``.
        """

    @abc.abstractmethod
    def get_iterable_nested(self, path: str, item: Program[Any]) -> Sequence[str] | None:
        """Return the ordered element ids of the record list at ``path``."""

    @abc.abstractmethod
    def keys(self) -> tuple[str, ...]:
        """Return every flattened dotted key, sorted."""

    def get_scalar(self, path: str, kind: ElementKind) -> object | None:
        if kind is ElementKind.STRING:
            return self.get_string(path)
        if kind is ElementKind.INTEGER:
            return self.get_integer(path)
        return self.get_boolean(path)


def parse_integer(text: str, path: str) -> int:
    stripped = text.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise MalformedValueError(path, ElementKind.INTEGER.type_name, text)
    return int(stripped)


def parse_boolean(text: str, path: str) -> bool:
    normalized = text.strip().lower()
    if normalized in BOOLEAN_TRUE:
        return True
    if normalized in BOOLEAN_FALSE:
        return False
    raise MalformedValueError(path, ElementKind.BOOLEAN.type_name, text)


__all__ = ["Source", "parse_boolean", "parse_integer"]
