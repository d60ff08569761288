"""
pureconf — error taxonomy.

File: src/pureconf/errors.py
Last updated: 2026-10-19

Purpose
- Define every exception raised by program construction, sources, and interpreters.

What should be included in this file
- A single ``PureConfError`` root so callers can catch the whole family.
- Read failures that carry the full dotted path of the offending key.
- Structured validation issues shared by the validating interpreter and settings.

Functional requirements
- ``MissingKeyError`` and ``MalformedValueError`` expose ``path`` for reporting.
- ``ProgramValidationError`` renders every issue, one per line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class FailureKind(StrEnum):
    """Why a leaf read failed."""

    MISSING_KEY = "missing_key"
    MALFORMED_VALUE = "malformed_value"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single structured failure collected by the validating interpreter."""

    path: str
    kind: FailureKind
    message: str


class PureConfError(Exception):
    """Base class for all pureconf failures."""


class InvalidProgramError(PureConfError, ValueError):
    """Raised when a program is assembled from invalid parts."""


class SourceError(PureConfError, ValueError):
    """Raised when a source cannot be loaded or parsed."""


class SettingsError(PureConfError, ValueError):
    """Raised when runtime settings cannot be coerced."""


class ReadError(PureConfError):
    """A leaf read failed at ``path``."""

    kind: FailureKind

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class MissingKeyError(ReadError, LookupError):
    """Raised when a required key is absent from the source."""

    kind = FailureKind.MISSING_KEY

    def __init__(self, path: str) -> None:
        super().__init__(path, f"key not found: {path}")


class MalformedValueError(ReadError, ValueError):
    """Raised when a key is present but its value cannot be coerced."""

    kind = FailureKind.MALFORMED_VALUE

    def __init__(self, path: str, expected: str, raw: object = None) -> None:
        self.expected = expected
        self.raw = raw
        super().__init__(path, f"malformed value for {path}: expected {expected}, got {raw!r}")


class ProgramValidationError(PureConfError, ValueError):
    """Raised when a validation result is unwrapped while invalid."""

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid config:\n{rendered}")


__all__ = [
    "FailureKind",
    "InvalidProgramError",
    "MalformedValueError",
    "MissingKeyError",
    "ProgramValidationError",
    "PureConfError",
    "ReadError",
    "SettingsError",
    "SourceError",
    "ValidationIssue",
]
