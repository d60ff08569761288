"""Output rendering abstraction for the pureconf CLI.

File: src/pureconf/ui/render.py
Last updated: 2026-10-19

Purpose
- Provide a thin plain-text rendering layer for CLI output.

What should be included in this file
- CLIRenderer class with methods for common output patterns.
- Factory function to create a renderer with appropriate settings.

Functional requirements
- Output is deterministic and goes to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class CLIRenderer:
    """Thin CLI output renderer producing clean, deterministic plain text."""

    def __init__(self, *, verbose: bool = False) -> None:
        self.verbose = verbose

    def heading(self, text: str) -> None:
        """Print a heading line."""

        print(text)

    def text(self, line: str) -> None:
        """Print a plain text line."""

        print(line)

    def items(self, entries: Sequence[str], *, prefix: str = "- ") -> None:
        """Print a bulleted list."""

        for entry in entries:
            print(f"  {prefix}{entry}")

    def ok(self, label: str) -> None:
        """Print a passing check."""

        print(f"  OK  {label}")

    def fail(self, label: str) -> None:
        """Print a failing check."""

        print(f"  FAIL  {label}")


def create_renderer(*, verbose: bool = False) -> CLIRenderer:
    """Create a CLI renderer with the given settings."""

    return CLIRenderer(verbose=verbose)


__all__ = ["CLIRenderer", "create_renderer"]
