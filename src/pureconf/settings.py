"""
pureconf — runtime settings for the command-line front end.

File: src/pureconf/settings.py
Last updated: 2026-10-19

Purpose
- Resolve the CLI's own logging settings from flags, environment, and defaults.

What should be included in this file
- Precedence logic: CLI > env (PURECONF_) > defaults.
- Environment values read through a pureconf program over a ``FlatSource``.

Functional requirements
- ``PURECONF_LOG_LEVEL`` must name a stdlib logging level.
- ``PURECONF_LOG_JSON`` accepts the shared boolean tables.
- A malformed environment value raises ``SettingsError`` naming the variable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from pureconf.constants import DEFAULT_LOG_LEVEL, ENV_PREFIX
from pureconf.errors import FailureKind, SettingsError
from pureconf.interpreters.base import fold
from pureconf.interpreters.validating import VALIDATING, Invalid, ValidationResult
from pureconf.program.key_path import KeyPath
from pureconf.program.program import Program, read_bool, read_string
from pureconf.sources.flat import FlatSource

_LOG_LEVEL_KEY: Final[str] = "log_level"
_LOG_JSON_KEY: Final[str] = "log_json"

_FIELD_PROGRAMS: Final[dict[str, Program[Any]]] = {
    _LOG_LEVEL_KEY: read_string(_LOG_LEVEL_KEY),
    _LOG_JSON_KEY: read_bool(_LOG_JSON_KEY),
}


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False


def resolve_settings(
    cli_overrides: Mapping[str, object] | None = None,
    environ: Mapping[str, str] | None = None,
) -> RuntimeSettings:
    """Resolve settings with deterministic precedence: CLI > env > defaults."""

    env_map = os.environ if environ is None else environ
    resolved: dict[str, Any] = dict(_env_values(env_map))

    for key, value in (cli_overrides or {}).items():
        if key not in _FIELD_PROGRAMS:
            raise SettingsError(f"unknown setting: {key}")
        if value is not None:
            resolved[key] = value

    settings = RuntimeSettings(**resolved)
    return RuntimeSettings(
        log_level=_normalize_level(settings.log_level, origin=_LOG_LEVEL_KEY),
        log_json=bool(settings.log_json),
    )


def env_source(environ: Mapping[str, str]) -> FlatSource:
    """Project ``PURECONF_*`` variables onto lower-case keys without the prefix."""

    entries = {
        name[len(ENV_PREFIX) :].lower(): value
        for name, value in environ.items()
        if name.startswith(ENV_PREFIX) and len(name) > len(ENV_PREFIX)
    }
    return FlatSource(entries, origin="<environ>")


def _env_values(environ: Mapping[str, str]) -> dict[str, Any]:
    source = env_source(environ)
    values: dict[str, Any] = {}
    for key, program in _FIELD_PROGRAMS.items():
        result = _validate_silently(program, source)
        if isinstance(result, Invalid):
            issue = result.issues[0]
            if issue.kind is FailureKind.MISSING_KEY:
                continue
            raise SettingsError(
                f"invalid value for {_env_name(key)}: {source.get_string(key)!r}"
            )
        values[key] = result.value
    if _LOG_LEVEL_KEY in values:
        values[_LOG_LEVEL_KEY] = _normalize_level(
            values[_LOG_LEVEL_KEY], origin=_env_name(_LOG_LEVEL_KEY)
        )
    return values


def _validate_silently(program: Program[Any], source: FlatSource) -> ValidationResult[Any]:
    # Settings resolve before configure_logging runs, so skip evaluate() and its events.
    carried = fold(program, VALIDATING, KeyPath.root(), source)
    return VALIDATING.finish(carried)  # type: ignore[no-any-return]


def _normalize_level(value: object, *, origin: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"invalid value for {origin}: {value!r}")
    normalized = value.strip().upper()
    if not isinstance(logging.getLevelName(normalized), int):
        raise SettingsError(f"invalid value for {origin}: unsupported logging level {value!r}")
    return normalized


def _env_name(key: str) -> str:
    return f"{ENV_PREFIX}{key.upper()}"


__all__ = ["RuntimeSettings", "env_source", "resolve_settings"]
