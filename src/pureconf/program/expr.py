"""
pureconf — expression nodes.

File: src/pureconf/program/expr.py
Last updated: 2026-10-19

Purpose
- Define the closed tagged union of read operations a program is built from.

What should be included in this file
- One frozen dataclass per variant: literal, scalar reads, lists, nested scopes.
- Key fragment validation shared by every keyed variant.

Functional requirements
- Keyed variants hold a single non-empty path segment, never a full dotted path.
- Construction has no side effects; misuse raises ``InvalidProgramError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeAlias, TypeVar

from pureconf.constants import KEY_SEPARATOR
from pureconf.errors import InvalidProgramError

if TYPE_CHECKING:
    from pureconf.program.program import Program

T = TypeVar("T")


class ElementKind(StrEnum):
    """Scalar kinds a leaf or primitive list can hold."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"

    @property
    def type_name(self) -> str:
        return _TYPE_NAMES[self]


_TYPE_NAMES: dict[ElementKind, str] = {
    ElementKind.STRING: "String",
    ElementKind.INTEGER: "Integer",
    ElementKind.BOOLEAN: "Boolean",
}


def validate_key(key: object) -> str:
    """Return ``key`` if it is a usable single path segment."""

    if not isinstance(key, str):
        raise InvalidProgramError(f"key must be a string, got {type(key).__name__}")
    if not key or not key.strip():
        raise InvalidProgramError("key must not be empty")
    if KEY_SEPARATOR in key:
        raise InvalidProgramError(f"key must be a single path segment, got {key!r}")
    return key


def _validate_program(value: object, owner: str) -> None:
    from pureconf.program.program import Program

    if not isinstance(value, Program):
        raise InvalidProgramError(
            f"{owner} requires a Program, got {type(value).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Pure(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class ReadString:
    key: str

    kind: ClassVar[ElementKind] = ElementKind.STRING

    def __post_init__(self) -> None:
        validate_key(self.key)


@dataclass(frozen=True, slots=True)
class ReadInt:
    key: str

    kind: ClassVar[ElementKind] = ElementKind.INTEGER

    def __post_init__(self) -> None:
        validate_key(self.key)


@dataclass(frozen=True, slots=True)
class ReadBool:
    key: str

    kind: ClassVar[ElementKind] = ElementKind.BOOLEAN

    def __post_init__(self) -> None:
        validate_key(self.key)


@dataclass(frozen=True, slots=True)
class ReadPrimitiveList:
    key: str
    element_kind: ElementKind

    def __post_init__(self) -> None:
        validate_key(self.key)
        if not isinstance(self.element_kind, ElementKind):
            raise InvalidProgramError(
                f"element kind must be an ElementKind, got {self.element_kind!r}"
            )


@dataclass(frozen=True, slots=True)
class ReadList(Generic[T]):
    """List of structured records, one ``item`` evaluation per element."""

    key: str
    item: Program[T]

    def __post_init__(self) -> None:
        validate_key(self.key)
        _validate_program(self.item, "ReadList")


@dataclass(frozen=True, slots=True)
class ReadNested(Generic[T]):
    """Sub-namespace: every key ``inner`` reads is prefixed by ``key``."""

    key: str
    inner: Program[T]

    def __post_init__(self) -> None:
        validate_key(self.key)
        _validate_program(self.inner, "ReadNested")


ScalarRead: TypeAlias = ReadString | ReadInt | ReadBool
Expr: TypeAlias = Pure[Any] | ScalarRead | ReadPrimitiveList | ReadList[Any] | ReadNested[Any]

_SCALAR_READS: dict[ElementKind, type[ReadString] | type[ReadInt] | type[ReadBool]] = {
    ElementKind.STRING: ReadString,
    ElementKind.INTEGER: ReadInt,
    ElementKind.BOOLEAN: ReadBool,
}


def scalar_read(kind: ElementKind, key: str) -> ScalarRead:
    """Build the scalar read expression for ``kind`` at ``key``."""

    return _SCALAR_READS[kind](key)


__all__ = [
    "ElementKind",
    "Expr",
    "Pure",
    "ReadBool",
    "ReadInt",
    "ReadList",
    "ReadNested",
    "ReadPrimitiveList",
    "ReadString",
    "ScalarRead",
    "scalar_read",
    "validate_key",
]
