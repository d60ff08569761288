"""
pureconf — declarative configuration programs.

File: src/pureconf/__init__.py
Last updated: 2026-10-19

Purpose
- Package root. Re-exports the construction, evaluation, and source APIs.

What should be included in this file
- ``__version__`` and the public symbols listed in ``__all__``.

Functional requirements
- Must not have side effects at import time (no config loading, no logging init).
"""

from pureconf.errors import (
    FailureKind,
    InvalidProgramError,
    MalformedValueError,
    MissingKeyError,
    ProgramValidationError,
    PureConfError,
    ReadError,
    SettingsError,
    SourceError,
    ValidationIssue,
)
from pureconf.interpreters import (
    DESCRIBING,
    EAGER,
    OPTIONAL,
    VALIDATING,
    DescribingStrategy,
    EagerStrategy,
    Invalid,
    OptionalStrategy,
    SourceStrategy,
    Strategy,
    Valid,
    ValidatingStrategy,
    ValidationResult,
    describe,
    evaluate,
    run_eager,
    run_optional,
    run_validating,
)
from pureconf.program import (
    ElementKind,
    KeyPath,
    Program,
    map2,
    map3,
    map4,
    map5,
    pure,
    read_bool,
    read_int,
    read_list,
    read_nested,
    read_string,
)
from pureconf.sources import (
    DocumentSource,
    FlatSource,
    LayeredSource,
    Source,
    from_args,
    from_json,
    from_mapping,
    from_properties,
    from_toml,
    from_yaml,
    load_source,
    load_sources,
)

__version__ = "0.1.0"

__all__ = [
    "DESCRIBING",
    "DescribingStrategy",
    "DocumentSource",
    "EAGER",
    "EagerStrategy",
    "ElementKind",
    "FailureKind",
    "FlatSource",
    "Invalid",
    "InvalidProgramError",
    "KeyPath",
    "LayeredSource",
    "MalformedValueError",
    "MissingKeyError",
    "OPTIONAL",
    "OptionalStrategy",
    "Program",
    "ProgramValidationError",
    "PureConfError",
    "ReadError",
    "SettingsError",
    "Source",
    "SourceError",
    "SourceStrategy",
    "Strategy",
    "VALIDATING",
    "Valid",
    "ValidatingStrategy",
    "ValidationIssue",
    "ValidationResult",
    "__version__",
    "describe",
    "evaluate",
    "from_args",
    "from_json",
    "from_mapping",
    "from_properties",
    "from_toml",
    "from_yaml",
    "load_source",
    "load_sources",
    "map2",
    "map3",
    "map4",
    "map5",
    "pure",
    "read_bool",
    "read_int",
    "read_list",
    "read_nested",
    "read_string",
    "run_eager",
    "run_optional",
    "run_validating",
]
