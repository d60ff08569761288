"""Immutable dotted key-path accumulator used while walking a program."""

from __future__ import annotations

from dataclasses import dataclass

from pureconf.constants import KEY_SEPARATOR


@dataclass(frozen=True, slots=True)
class KeyPath:
    """Prefix chain from the root to the scope currently being interpreted.

    ``parent is None`` marks the root, whose prefix is empty. Each descent
    returns a new instance; existing paths are never modified.
    """

    parent: KeyPath | None = None
    fragment: str = ""

    @classmethod
    def root(cls) -> KeyPath:
        return _ROOT

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def prefix(self) -> str:
        if self.parent is None:
            return ""
        return self.parent.resolve(self.fragment)

    def child(self, fragment: str) -> KeyPath:
        return KeyPath(parent=self, fragment=fragment)

    def resolve(self, fragment: str) -> str:
        """Return the full dotted path of ``fragment`` inside this scope."""

        if self.is_root:
            return fragment
        return f"{self.prefix}{KEY_SEPARATOR}{fragment}"


_ROOT = KeyPath()

__all__ = ["KeyPath"]
