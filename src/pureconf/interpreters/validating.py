"""
pureconf — error-accumulating interpreter.

File: src/pureconf/interpreters/validating.py
Last updated: 2026-10-19

Purpose
- Evaluate a program while collecting every failing leaf instead of stopping at the first.

What should be included in this file
- ``Valid``/``Invalid`` result carrier and its unwrapping helpers.
- ``ValidatingStrategy`` merging issues across ``ap`` joins.

Functional requirements
- Missing and malformed leaves both render as ``key not found: <path>``;
  ``ValidationIssue.kind`` keeps the distinction.
- Issue order follows right-to-left ``ap`` evaluation: the argument side's
  issues come before the function side's. For ``map3(a, b, c, f)`` that is
  ``c, b, a``; for lists, the last failing element comes first.
- Duplicate issues are reported once, at their first position.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar

from pureconf.constants import KEY_NOT_FOUND_PREFIX
from pureconf.errors import ProgramValidationError, ValidationIssue
from pureconf.interpreters.base import SourceStrategy, evaluate

if TYPE_CHECKING:
    from pureconf.errors import ReadError
    from pureconf.program.program import Program
    from pureconf.sources.base import Source

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    value: T

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def messages(self) -> tuple[str, ...]:
        return ()

    @property
    def issues(self) -> tuple[ValidationIssue, ...]:
        return ()

    def get(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Invalid:
    issues: tuple[ValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(issue.message for issue in self.issues))

    def get(self) -> Any:
        raise ProgramValidationError(self.issues)


ValidationResult: TypeAlias = Valid[T] | Invalid


def issue_for(error: ReadError) -> ValidationIssue:
    return ValidationIssue(
        path=error.path,
        kind=error.kind,
        message=f"{KEY_NOT_FOUND_PREFIX}{error.path}",
    )


def merge_issues(
    first: Sequence[ValidationIssue], second: Sequence[ValidationIssue]
) -> tuple[ValidationIssue, ...]:
    merged: list[ValidationIssue] = []
    seen: set[ValidationIssue] = set()
    for issue in (*first, *second):
        if issue in seen:
            continue
        seen.add(issue)
        merged.append(issue)
    return tuple(merged)


class ValidatingStrategy(SourceStrategy["ValidationResult[Any]"]):
    name = "validating"

    def pure(self, value: Any) -> ValidationResult[Any]:
        return Valid(value)

    def map(
        self, carried: ValidationResult[Any], fn: Callable[[Any], Any]
    ) -> ValidationResult[Any]:
        if isinstance(carried, Invalid):
            return carried
        return Valid(fn(carried.value))

    def ap(
        self, fn_carried: ValidationResult[Any], arg_carried: ValidationResult[Any]
    ) -> ValidationResult[Any]:
        if isinstance(fn_carried, Valid) and isinstance(arg_carried, Valid):
            return Valid(fn_carried.value(arg_carried.value))
        return Invalid(merge_issues(arg_carried.issues, fn_carried.issues))

    def failed(self, error: ReadError) -> ValidationResult[Any]:
        return Invalid((issue_for(error),))


VALIDATING = ValidatingStrategy()


def run_validating(program: Program[T], source: Source) -> ValidationResult[T]:
    return evaluate(program, VALIDATING, source)  # type: ignore[no-any-return]


__all__ = [
    "VALIDATING",
    "Invalid",
    "Valid",
    "ValidatingStrategy",
    "ValidationResult",
    "issue_for",
    "merge_issues",
    "run_validating",
]
