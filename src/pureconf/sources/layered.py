"""Precedence chain over several sources: the first source holding a key wins."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from pureconf.errors import SourceError
from pureconf.sources.base import Source

if TYPE_CHECKING:
    from pureconf.program.expr import ElementKind, Expr
    from pureconf.program.program import Program


class LayeredSource(Source):
    """Consult ``layers`` in order, highest precedence first.

    A malformed value in a higher layer is reported as such; it does not fall
    through to lower layers.
    """

    def __init__(self, *layers: Source) -> None:
        if not layers:
            raise SourceError("LayeredSource requires at least one layer")
        for layer in layers:
            if not isinstance(layer, Source):
                raise SourceError(f"layer must be a Source, got {type(layer).__name__}")
        self.layers: tuple[Source, ...] = layers

    def get_string(self, path: str) -> str | None:
        return _first(layer.get_string(path) for layer in self.layers)

    def get_integer(self, path: str) -> int | None:
        return _first(layer.get_integer(path) for layer in self.layers)

    def get_boolean(self, path: str) -> bool | None:
        return _first(layer.get_boolean(path) for layer in self.layers)

    def get_iterable_primitive(self, path: str, kind: ElementKind) -> Sequence[Expr] | None:
        return _first(layer.get_iterable_primitive(path, kind) for layer in self.layers)

    def get_iterable_nested(self, path: str, item: Program[Any]) -> Sequence[str] | None:
        return _first(layer.get_iterable_nested(path, item) for layer in self.layers)

    def keys(self) -> tuple[str, ...]:
        merged: set[str] = set()
        for layer in self.layers:
            merged.update(layer.keys())
        return tuple(sorted(merged))

    def __repr__(self) -> str:
        return f"LayeredSource({', '.join(repr(layer) for layer in self.layers)})"


def _first(candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


__all__ = ["LayeredSource"]
