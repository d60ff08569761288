"""
pureconf — unit tests for the error-accumulating interpreter

File: tests/unit/interpreters/test_validating.py
Last updated: 2026-10-19

Purpose
- Validate that every failing leaf is reported together, in a stable order.

What this test file should cover
- Right-to-left message ordering across ``ap`` joins and list elements.
- Missing vs malformed distinction on ``ValidationIssue.kind``.
- De-duplication of repeated issues.
- ``Valid.get`` / ``Invalid.get`` unwrapping.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from pureconf import (
    VALIDATING,
    FailureKind,
    FlatSource,
    Invalid,
    ProgramValidationError,
    Valid,
    map2,
    map3,
    read_bool,
    read_int,
    read_list,
    read_nested,
    read_string,
)


@dataclass(frozen=True)
class Server:
    host: str
    port: int
    active: bool


SERVER = read_nested(
    "server", map3(read_string("host"), read_int("port"), read_bool("active"), Server)
)


@pytest.mark.unit
def test_valid_source_yields_valid_result() -> None:
    source = FlatSource(
        {"server.host": "localhost", "server.port": "8080", "server.active": "false"}
    )

    result = SERVER.run_validating(source)

    assert isinstance(result, Valid)
    assert result.is_valid
    assert result.messages == ()
    assert result.get() == Server("localhost", 8080, False)


@pytest.mark.unit
def test_empty_source_reports_every_field_right_to_left() -> None:
    result = SERVER.run_validating(FlatSource({}))

    assert isinstance(result, Invalid)
    assert not result.is_valid
    assert result.messages == (
        "key not found: server.active",
        "key not found: server.port",
        "key not found: server.host",
    )


@pytest.mark.unit
def test_two_missing_fields_yield_exactly_two_messages() -> None:
    result = SERVER.run_validating(FlatSource({"server.port": "1"}))

    assert result.messages == ("key not found: server.active", "key not found: server.host")


@pytest.mark.unit
def test_malformed_values_render_as_key_not_found_but_keep_their_kind() -> None:
    source = FlatSource(
        {"server.host": "localhost", "server.port": "eighty", "server.active": "maybe"}
    )

    result = SERVER.run(VALIDATING, source)

    assert isinstance(result, Invalid)
    assert result.messages == ("key not found: server.active", "key not found: server.port")
    assert [issue.kind for issue in result.issues] == [
        FailureKind.MALFORMED_VALUE,
        FailureKind.MALFORMED_VALUE,
    ]
    assert [issue.path for issue in result.issues] == ["server.active", "server.port"]


@pytest.mark.unit
def test_missing_and_malformed_kinds_are_distinguished() -> None:
    result = SERVER.run_validating(FlatSource({"server.port": "x"}))

    kinds = {issue.path: issue.kind for issue in result.issues}
    assert kinds == {
        "server.active": FailureKind.MISSING_KEY,
        "server.port": FailureKind.MALFORMED_VALUE,
        "server.host": FailureKind.MISSING_KEY,
    }


@pytest.mark.unit
def test_list_elements_report_last_failing_element_first() -> None:
    program = read_list("list", read_string("it"))
    source = FlatSource({"list.0.other": "a", "list.1.it": "b", "list.2.other": "c"})

    result = program.run_validating(source)

    assert result.messages == ("key not found: list.2.it", "key not found: list.0.it")


@pytest.mark.unit
def test_missing_list_root_is_a_single_message() -> None:
    result = read_list("list", read_string("it")).run_validating(FlatSource({}))

    assert result.messages == ("key not found: list",)


@pytest.mark.unit
def test_repeated_reads_of_one_key_are_reported_once() -> None:
    program = map2(read_string("name"), read_string("name"), lambda left, right: left + right)

    result = program.run_validating(FlatSource({}))

    assert result.messages == ("key not found: name",)
    assert len(result.issues) == 1


@pytest.mark.unit
def test_invalid_get_raises_with_every_issue() -> None:
    result = SERVER.run_validating(FlatSource({}))

    with pytest.raises(ProgramValidationError) as excinfo:
        result.get()

    assert len(excinfo.value.issues) == 3
    assert str(excinfo.value).splitlines() == [
        "invalid config:",
        "- server.active: key not found: server.active",
        "- server.port: key not found: server.port",
        "- server.host: key not found: server.host",
    ]
