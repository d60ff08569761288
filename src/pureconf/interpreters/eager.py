"""Fail-fast interpreter: the first missing or malformed leaf aborts the walk."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from pureconf.interpreters.base import SourceStrategy, evaluate

if TYPE_CHECKING:
    from pureconf.errors import ReadError
    from pureconf.program.program import Program
    from pureconf.sources.base import Source

T = TypeVar("T")


class EagerStrategy(SourceStrategy[Any]):
    """Carries bare values; failures propagate as exceptions."""

    name = "eager"

    def pure(self, value: Any) -> Any:
        return value

    def map(self, carried: Any, fn: Callable[[Any], Any]) -> Any:
        return fn(carried)

    def ap(self, fn_carried: Any, arg_carried: Any) -> Any:
        return fn_carried(arg_carried)

    def failed(self, error: ReadError) -> NoReturn:
        raise error


EAGER = EagerStrategy()


def run_eager(program: Program[T], source: Source) -> T:
    """Evaluate ``program`` or raise ``MissingKeyError``/``MalformedValueError``."""

    return evaluate(program, EAGER, source)  # type: ignore[no-any-return]


__all__ = ["EAGER", "EagerStrategy", "run_eager"]
