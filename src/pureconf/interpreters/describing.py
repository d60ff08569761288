"""Schema interpreter: renders one ``- <path>: <Type>`` line per leaf without a source."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pureconf.constants import LIST_PLACEHOLDER
from pureconf.interpreters.base import Strategy, evaluate, fold

if TYPE_CHECKING:
    from pureconf.program.expr import ReadList, ReadPrimitiveList, ScalarRead
    from pureconf.program.key_path import KeyPath
    from pureconf.program.program import Program
    from pureconf.sources.base import Source


class DescribingStrategy(Strategy[str]):
    """Carries text; composition concatenates left to right."""

    name = "describing"
    requires_source = False

    def pure(self, value: Any) -> str:
        return ""

    def map(self, carried: str, fn: Callable[[Any], Any]) -> str:
        return carried

    def ap(self, fn_carried: str, arg_carried: str) -> str:
        return fn_carried + arg_carried

    def read_scalar(self, expr: ScalarRead, path: KeyPath, source: Source | None) -> str:
        return _line(path.resolve(expr.key), expr.kind.type_name)

    def read_primitive_list(
        self, expr: ReadPrimitiveList, path: KeyPath, source: Source | None
    ) -> str:
        return _line(path.resolve(expr.key), f"{expr.element_kind.type_name}[]")

    def read_list(self, expr: ReadList[Any], path: KeyPath, source: Source | None) -> str:
        return fold(expr.item, self, path.child(expr.key).child(LIST_PLACEHOLDER), None)


def _line(path: str, type_name: str) -> str:
    return f"- {path}: {type_name}\n"


DESCRIBING = DescribingStrategy()


def describe(program: Program[Any]) -> str:
    return evaluate(program, DESCRIBING)  # type: ignore[no-any-return]


__all__ = ["DESCRIBING", "DescribingStrategy", "describe"]
