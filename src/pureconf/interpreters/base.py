"""
pureconf — shared program traversal.

File: src/pureconf/interpreters/base.py
Last updated: 2026-10-19

Purpose
- Walk a program once, delegating every node to a strategy object.

What should be included in this file
- ``Strategy``: the result carrier operations (``pure``/``map``/``ap``) plus
  leaf handling.
- ``SourceStrategy``: leaf and list handling for strategies that consult a
  source, parameterised only by how a failed read is carried.
- ``fold``/``fold_expr``/``evaluate`` entrypoints.

Functional requirements
- Both sides of an ``ap`` node are folded independently, function side first.
- List elements are sequenced through the strategy's own ``ap``, so element
  failures combine exactly like sibling failures.
- Key paths are rebuilt from the root on every walk; nodes only hold fragments.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pureconf.errors import InvalidProgramError, MalformedValueError, MissingKeyError, ReadError
from pureconf.observability.logging import get_logger
from pureconf.program.expr import (
    Pure,
    ReadBool,
    ReadInt,
    ReadList,
    ReadNested,
    ReadPrimitiveList,
    ReadString,
)
from pureconf.program.key_path import KeyPath
from pureconf.program.program import Applied, Mapped, Program

if TYPE_CHECKING:
    from pureconf.program.expr import Expr, ScalarRead
    from pureconf.sources.base import Source

F = TypeVar("F")

logger = get_logger(__name__)


class Strategy(abc.ABC, Generic[F]):
    """How one interpretation carries results through a program walk."""

    name: ClassVar[str]
    requires_source: ClassVar[bool] = True

    @abc.abstractmethod
    def pure(self, value: Any) -> F: ...

    @abc.abstractmethod
    def map(self, carried: F, fn: Callable[[Any], Any]) -> F: ...

    @abc.abstractmethod
    def ap(self, fn_carried: F, arg_carried: F) -> F: ...

    @abc.abstractmethod
    def read_scalar(self, expr: ScalarRead, path: KeyPath, source: Source | None) -> F: ...

    @abc.abstractmethod
    def read_primitive_list(
        self, expr: ReadPrimitiveList, path: KeyPath, source: Source | None
    ) -> F: ...

    @abc.abstractmethod
    def read_list(self, expr: ReadList[Any], path: KeyPath, source: Source | None) -> F: ...

    def sequence(self, items: Iterable[F]) -> F:
        """Combine carried elements into one carried list, in element order."""

        acc = self.pure(())
        for item in items:
            acc = self.ap(self.map(acc, _appender), item)
        return self.map(acc, list)

    def finish(self, carried: F) -> Any:
        return carried

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _appender(items: tuple[Any, ...]) -> Callable[[Any], tuple[Any, ...]]:
    return lambda item: (*items, item)


class SourceStrategy(Strategy[F]):
    """Strategy resolving leaves against a source; subclasses decide failure handling."""

    @abc.abstractmethod
    def failed(self, error: ReadError) -> F:
        """Carry a failed leaf read."""

    def read_scalar(self, expr: ScalarRead, path: KeyPath, source: Source | None) -> F:
        full_path = path.resolve(expr.key)
        try:
            value = _require_source(source).get_scalar(full_path, expr.kind)
        except MalformedValueError as exc:
            return self.failed(exc)
        if value is None:
            return self.failed(MissingKeyError(full_path))
        return self.pure(value)

    def read_primitive_list(
        self, expr: ReadPrimitiveList, path: KeyPath, source: Source | None
    ) -> F:
        resolved = _require_source(source)
        full_path = path.resolve(expr.key)
        try:
            elements = resolved.get_iterable_primitive(full_path, expr.element_kind)
        except MalformedValueError as exc:
            return self.failed(exc)
        if elements is None:
            return self.failed(MissingKeyError(full_path))
        scope = path.child(expr.key)
        return self.sequence(fold_expr(element, self, scope, resolved) for element in elements)

    def read_list(self, expr: ReadList[Any], path: KeyPath, source: Source | None) -> F:
        resolved = _require_source(source)
        full_path = path.resolve(expr.key)
        try:
            element_ids = resolved.get_iterable_nested(full_path, expr.item)
        except MalformedValueError as exc:
            return self.failed(exc)
        if element_ids is None:
            return self.failed(MissingKeyError(full_path))
        scope = path.child(expr.key)
        return self.sequence(
            fold(expr.item, self, scope.child(element_id), resolved) for element_id in element_ids
        )


def _require_source(source: Source | None) -> Source:
    if source is None:
        raise ValueError("this strategy requires a source")
    return source


def fold(program: Program[Any], strategy: Strategy[F], path: KeyPath, source: Source | None) -> F:
    """Interpret ``program`` in the scope ``path``."""

    node = program.node
    if isinstance(node, Mapped):
        return strategy.map(fold(node.program, strategy, path, source), node.fn)
    if isinstance(node, Applied):
        fn_carried = fold(node.fn_program, strategy, path, source)
        arg_carried = fold(node.arg_program, strategy, path, source)
        return strategy.ap(fn_carried, arg_carried)
    return fold_expr(node, strategy, path, source)


def fold_expr(expr: Expr, strategy: Strategy[F], path: KeyPath, source: Source | None) -> F:
    if isinstance(expr, Pure):
        return strategy.pure(expr.value)
    if isinstance(expr, (ReadString, ReadInt, ReadBool)):
        return strategy.read_scalar(expr, path, source)
    if isinstance(expr, ReadPrimitiveList):
        return strategy.read_primitive_list(expr, path, source)
    if isinstance(expr, ReadList):
        return strategy.read_list(expr, path, source)
    if isinstance(expr, ReadNested):
        return fold(expr.inner, strategy, path.child(expr.key), source)
    raise InvalidProgramError(f"unsupported expression node: {type(expr).__name__}")


def evaluate(program: Program[Any], strategy: Strategy[Any], source: Source | None = None) -> Any:
    """Walk ``program`` once with ``strategy`` and return the finished result."""

    if not isinstance(program, Program):
        raise InvalidProgramError(f"expected a Program, got {type(program).__name__}")
    if not isinstance(strategy, Strategy):
        raise TypeError(f"expected a Strategy, got {type(strategy).__name__}")
    if strategy.requires_source and source is None:
        raise ValueError(f"{strategy.name} strategy requires a source")

    try:
        carried = fold(program, strategy, KeyPath.root(), source)
    except ReadError as exc:
        logger.debug(
            "program evaluation aborted",
            strategy=strategy.name,
            path=exc.path,
            kind=exc.kind.value,
        )
        raise

    result = strategy.finish(carried)
    logger.debug("program evaluated", strategy=strategy.name)
    return result


__all__ = ["SourceStrategy", "Strategy", "evaluate", "fold", "fold_expr"]
