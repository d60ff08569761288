"""Stable constants shared across the program, interpreter, and source layers."""

from __future__ import annotations

from typing import Final

# Dotted key-path wire format.
KEY_SEPARATOR: Final[str] = "."
LIST_PLACEHOLDER: Final[str] = "[]"

# Validation message prefix; both missing and malformed leaves render with it.
KEY_NOT_FOUND_PREFIX: Final[str] = "key not found: "

# Boolean coercion tables for text-valued sources.
BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})

# Runtime settings for the command-line front end.
ENV_PREFIX: Final[str] = "PURECONF_"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_LOGGER_NAME: Final[str] = "pureconf"

# Source formats recognised by file suffix.
SOURCE_FORMATS: Final[tuple[str, ...]] = ("properties", "toml", "yaml", "json")
SUFFIX_FORMATS: Final[dict[str, str]] = {
    ".properties": "properties",
    ".props": "properties",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}

__all__ = [
    "BOOLEAN_FALSE",
    "BOOLEAN_TRUE",
    "DEFAULT_LOGGER_NAME",
    "DEFAULT_LOG_LEVEL",
    "ENV_PREFIX",
    "KEY_NOT_FOUND_PREFIX",
    "KEY_SEPARATOR",
    "LIST_PLACEHOLDER",
    "SOURCE_FORMATS",
    "SUFFIX_FORMATS",
]
