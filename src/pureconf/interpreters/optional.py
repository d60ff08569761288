"""Fail-soft interpreter: any missing or malformed leaf collapses the result to ``None``."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, TypeVar

from pureconf.interpreters.base import SourceStrategy, evaluate

if TYPE_CHECKING:
    from pureconf.errors import ReadError
    from pureconf.program.program import Program
    from pureconf.sources.base import Source

T = TypeVar("T")


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final[Any] = _Absent()


class OptionalStrategy(SourceStrategy[Any]):
    """Carries values or ``ABSENT``; a join is absent when either side is."""

    name = "optional"

    def pure(self, value: Any) -> Any:
        return value

    def map(self, carried: Any, fn: Callable[[Any], Any]) -> Any:
        if carried is ABSENT:
            return ABSENT
        return fn(carried)

    def ap(self, fn_carried: Any, arg_carried: Any) -> Any:
        if fn_carried is ABSENT or arg_carried is ABSENT:
            return ABSENT
        return fn_carried(arg_carried)

    def failed(self, error: ReadError) -> Any:
        return ABSENT

    def finish(self, carried: Any) -> Any:
        return None if carried is ABSENT else carried


OPTIONAL = OptionalStrategy()


def run_optional(program: Program[T], source: Source) -> T | None:
    return evaluate(program, OPTIONAL, source)  # type: ignore[no-any-return]


__all__ = ["ABSENT", "OPTIONAL", "OptionalStrategy", "run_optional"]
