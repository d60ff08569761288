"""
pureconf interpreters public API.

File: src/pureconf/interpreters/__init__.py
Last updated: 2026-10-19

Purpose
- Export the four evaluation strategies and the shared traversal entrypoint.

Functional requirements
- Every strategy is a stateless value that can be passed to ``evaluate``.
"""

from pureconf.interpreters.base import SourceStrategy, Strategy, evaluate, fold, fold_expr
from pureconf.interpreters.describing import DESCRIBING, DescribingStrategy, describe
from pureconf.interpreters.eager import EAGER, EagerStrategy, run_eager
from pureconf.interpreters.optional import ABSENT, OPTIONAL, OptionalStrategy, run_optional
from pureconf.interpreters.validating import (
    VALIDATING,
    Invalid,
    Valid,
    ValidatingStrategy,
    ValidationResult,
    run_validating,
)

__all__ = [
    "ABSENT",
    "DESCRIBING",
    "DescribingStrategy",
    "EAGER",
    "EagerStrategy",
    "Invalid",
    "OPTIONAL",
    "OptionalStrategy",
    "SourceStrategy",
    "Strategy",
    "VALIDATING",
    "Valid",
    "ValidatingStrategy",
    "ValidationResult",
    "describe",
    "evaluate",
    "fold",
    "fold_expr",
    "run_eager",
    "run_optional",
    "run_validating",
]
