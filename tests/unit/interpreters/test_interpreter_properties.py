"""
pureconf — property tests across interpreters

File: tests/unit/interpreters/test_interpreter_properties.py
Last updated: 2026-10-19

Purpose
- Check the cross-interpreter agreements on generated flat sources.

What this test file should cover
- Eager success implies Optional present and Validating valid with the same value.
- Eager failure implies Optional absent and one Validating issue per failing field.
- Repeated evaluation and description are idempotent.
- Structured lists round-trip through indexed flat keys.

Non-functional requirements
- Deterministic: every hypothesis test runs derandomized.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pureconf import (
    FlatSource,
    Invalid,
    MalformedValueError,
    MissingKeyError,
    Valid,
    map3,
    read_bool,
    read_int,
    read_list,
    read_nested,
    read_string,
)
from pureconf.constants import BOOLEAN_FALSE, BOOLEAN_TRUE

PROGRAM = read_nested(
    "server",
    map3(
        read_string("host"),
        read_int("port"),
        read_bool("active"),
        lambda host, port, active: {"host": host, "port": port, "active": active},
    ),
)

_VALID_PORTS = st.integers(min_value=-(10**6), max_value=10**6).map(str)
_INVALID_PORTS = st.sampled_from(["", "x", "1.5", "0x10", "8080a"])
_VALID_FLAGS = st.sampled_from(["true", "FALSE", "1", "0", "yes", "off", " on "])
_INVALID_FLAGS = st.sampled_from(["", "maybe", "2", "truthy"])

_FIELDS = st.fixed_dictionaries(
    {
        "host": st.one_of(st.none(), st.text(max_size=12)),
        "port": st.one_of(st.none(), _VALID_PORTS, _INVALID_PORTS),
        "active": st.one_of(st.none(), _VALID_FLAGS, _INVALID_FLAGS),
    }
)


def _source(fields: dict[str, str | None]) -> FlatSource:
    return FlatSource(
        {f"server.{name}": value for name, value in fields.items() if value is not None}
    )


def _failing_fields(fields: dict[str, str | None]) -> set[str]:
    failing: set[str] = set()
    for name, value in fields.items():
        if value is None:
            failing.add(f"server.{name}")
        elif name == "port" and not _is_integer_text(value):
            failing.add("server.port")
        elif name == "active" and value.strip().lower() not in BOOLEAN_TRUE | BOOLEAN_FALSE:
            failing.add("server.active")
    return failing


def _is_integer_text(value: str) -> bool:
    stripped = value.strip()
    digits = stripped[1:] if stripped[:1] in {"+", "-"} else stripped
    return digits.isascii() and digits.isdigit()


@pytest.mark.unit
@settings(derandomize=True, max_examples=200)
@given(fields=_FIELDS)
def test_eager_agrees_with_optional_and_validating(fields: dict[str, str | None]) -> None:
    source = _source(fields)

    try:
        eager: Any = PROGRAM.run_eager(source)
    except (MissingKeyError, MalformedValueError):
        eager_failed = True
    else:
        eager_failed = False

    optional = PROGRAM.run_optional(source)
    validated = PROGRAM.run_validating(source)

    if eager_failed:
        assert optional is None
        assert isinstance(validated, Invalid)
    else:
        assert optional == eager
        assert isinstance(validated, Valid)
        assert validated.value == eager


@pytest.mark.unit
@settings(derandomize=True, max_examples=200)
@given(fields=_FIELDS)
def test_validating_reports_one_issue_per_failing_field(fields: dict[str, str | None]) -> None:
    result = PROGRAM.run_validating(_source(fields))
    expected = _failing_fields(fields)

    assert {issue.path for issue in result.issues} == expected
    assert len(result.messages) == len(expected)


@pytest.mark.unit
@settings(derandomize=True, max_examples=100)
@given(fields=_FIELDS)
def test_evaluation_is_idempotent(fields: dict[str, str | None]) -> None:
    source = _source(fields)

    assert PROGRAM.run_optional(source) == PROGRAM.run_optional(source)
    assert PROGRAM.run_validating(source) == PROGRAM.run_validating(source)
    assert PROGRAM.describe() == PROGRAM.describe()


@pytest.mark.unit
@settings(derandomize=True, max_examples=100)
@given(values=st.lists(st.text(max_size=8), min_size=1, max_size=12))
def test_structured_list_round_trip(values: list[str]) -> None:
    source = FlatSource({f"list.{index}.it": value for index, value in enumerate(values)})
    program = read_list("list", read_string("it"))

    assert program.run_eager(source) == values
    assert program.describe() == "- list.[].it: String\n"
