"""
pureconf — applicative program builder.

File: src/pureconf/program/program.py
Last updated: 2026-10-19

Purpose
- Wrap expression nodes into composable programs and expose the construction API.

What should be included in this file
- ``Program`` with ``map``/``ap`` and the evaluation shortcuts.
- Leaf constructors (``pure``, ``read_*``) and ``map2``..``map5`` lifting.

Functional requirements
- Composition never inspects results: both sides of ``ap`` are independent, so
  every leaf is reachable without evaluating any other leaf.
- Programs are immutable and reusable across sources and strategies.

Non-functional requirements
- Building a program performs no I/O and no logging.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar, overload

from pureconf.errors import InvalidProgramError
from pureconf.program.expr import (
    ElementKind,
    Expr,
    Pure,
    ReadBool,
    ReadInt,
    ReadList,
    ReadNested,
    ReadPrimitiveList,
    ReadString,
)

if TYPE_CHECKING:
    from pureconf.interpreters.base import Strategy
    from pureconf.interpreters.validating import ValidationResult
    from pureconf.sources.base import Source

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Mapped:
    """Result of ``program`` transformed by ``fn``."""

    program: Program[Any]
    fn: Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class Applied:
    """Result of ``fn_program`` applied to the result of ``arg_program``."""

    fn_program: Program[Any]
    arg_program: Program[Any]


Node: TypeAlias = Expr | Mapped | Applied


@dataclass(frozen=True, slots=True, eq=False)
class Program(Generic[T]):
    """Immutable description of a configuration read producing a ``T``."""

    node: Node

    def map(self, fn: Callable[[T], R]) -> Program[R]:
        _require_callable(fn, "map")
        return Program(Mapped(program=self, fn=fn))

    def ap(self, fn_program: Program[Callable[[T], R]]) -> Program[R]:
        """Apply the function produced by ``fn_program`` to this program's result."""

        if not isinstance(fn_program, Program):
            raise InvalidProgramError(
                f"ap requires a Program, got {type(fn_program).__name__}"
            )
        return Program(Applied(fn_program=fn_program, arg_program=self))

    def run(self, strategy: Strategy[Any], source: Source | None = None) -> Any:
        """Evaluate with an explicit strategy object."""

        from pureconf.interpreters import evaluate

        return evaluate(self, strategy, source)

    def run_eager(self, source: Source) -> T:
        """Return the value or raise the first ``ReadError`` encountered."""

        from pureconf.interpreters.eager import run_eager

        return run_eager(self, source)

    def run_optional(self, source: Source) -> T | None:
        """Return the value, or ``None`` when any leaf is missing or malformed.

        A program whose own result is ``None`` cannot be told apart from absence.
        """

        from pureconf.interpreters.optional import run_optional

        return run_optional(self, source)

    def run_validating(self, source: Source) -> ValidationResult[T]:
        from pureconf.interpreters.validating import run_validating

        return run_validating(self, source)

    def describe(self) -> str:
        from pureconf.interpreters.describing import describe

        return describe(self)

    def __repr__(self) -> str:
        return f"Program({type(self.node).__name__})"


def lift(expr: Expr) -> Program[Any]:
    """Wrap a single expression node into a program."""

    return Program(expr)


def pure(value: T) -> Program[T]:
    return lift(Pure(value))


def read_string(key: str) -> Program[str]:
    return lift(ReadString(key))


def read_int(key: str) -> Program[int]:
    return lift(ReadInt(key))


def read_bool(key: str) -> Program[bool]:
    return lift(ReadBool(key))


_PYTHON_TYPE_KINDS: dict[type, ElementKind] = {
    str: ElementKind.STRING,
    int: ElementKind.INTEGER,
    bool: ElementKind.BOOLEAN,
}


@overload
def read_list(key: str, item: Program[T]) -> Program[list[T]]: ...


@overload
def read_list(key: str, item: ElementKind | type) -> Program[list[Any]]: ...


def read_list(key: str, item: Program[Any] | ElementKind | type) -> Program[list[Any]]:
    """Read a list at ``key``.

    ``item`` is either a scalar kind (``ElementKind`` or one of ``str``, ``int``,
    ``bool``) for a list of primitives, or a program evaluated once per element.
    """

    if isinstance(item, Program):
        return lift(ReadList(key, item))
    if isinstance(item, ElementKind):
        return lift(ReadPrimitiveList(key, item))
    if isinstance(item, type) and item in _PYTHON_TYPE_KINDS:
        return lift(ReadPrimitiveList(key, _PYTHON_TYPE_KINDS[item]))
    raise InvalidProgramError(
        f"read_list item must be a Program or element kind, got {item!r}"
    )


def read_nested(key: str, inner: Program[T]) -> Program[T]:
    return lift(ReadNested(key, inner))


def _require_callable(fn: object, owner: str) -> None:
    if not callable(fn):
        raise InvalidProgramError(f"{owner} requires a callable, got {type(fn).__name__}")


def _require_programs(owner: str, *programs: object) -> None:
    for candidate in programs:
        if not isinstance(candidate, Program):
            raise InvalidProgramError(
                f"{owner} requires Program arguments, got {type(candidate).__name__}"
            )


def map2(fa: Program[A], fb: Program[B], fn: Callable[[A, B], R]) -> Program[R]:
    _require_programs("map2", fa, fb)
    _require_callable(fn, "map2")
    return fb.ap(fa.map(lambda a: lambda b: fn(a, b)))


def map3(
    fa: Program[A], fb: Program[B], fc: Program[C], fn: Callable[[A, B, C], R]
) -> Program[R]:
    _require_programs("map3", fa, fb, fc)
    _require_callable(fn, "map3")
    return fc.ap(map2(fa, fb, lambda a, b: lambda c: fn(a, b, c)))


def map4(
    fa: Program[A],
    fb: Program[B],
    fc: Program[C],
    fd: Program[D],
    fn: Callable[[A, B, C, D], R],
) -> Program[R]:
    _require_programs("map4", fa, fb, fc, fd)
    _require_callable(fn, "map4")
    return fd.ap(map3(fa, fb, fc, lambda a, b, c: lambda d: fn(a, b, c, d)))


def map5(
    fa: Program[A],
    fb: Program[B],
    fc: Program[C],
    fd: Program[D],
    fe: Program[E],
    fn: Callable[[A, B, C, D, E], R],
) -> Program[R]:
    _require_programs("map5", fa, fb, fc, fd, fe)
    _require_callable(fn, "map5")
    return fe.ap(map4(fa, fb, fc, fd, lambda a, b, c, d: lambda e: fn(a, b, c, d, e)))


__all__ = [
    "Applied",
    "Mapped",
    "Node",
    "Program",
    "lift",
    "map2",
    "map3",
    "map4",
    "map5",
    "pure",
    "read_bool",
    "read_int",
    "read_list",
    "read_nested",
    "read_string",
]
