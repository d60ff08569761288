"""
pureconf — unit tests for program construction

File: tests/unit/program/test_program_construction.py
Last updated: 2026-10-19

Purpose
- Validate that building programs is pure data assembly with strict preconditions.

What this test file should cover
- Key fragment validation for every leaf kind.
- ``read_list`` dispatch on its second argument.
- Rejection of non-Program arguments and non-callable functions.
- Immutability and reuse of built programs.
"""

from __future__ import annotations

import dataclasses

import pytest

from pureconf import (
    ElementKind,
    InvalidProgramError,
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
from pureconf.program import (
    Applied,
    Mapped,
    ReadList,
    ReadNested,
    ReadPrimitiveList,
    ReadString,
    lift,
)


@pytest.mark.unit
@pytest.mark.parametrize("builder", [read_string, read_int, read_bool])
@pytest.mark.parametrize("key", ["", "   ", "server.host", "a."])
def test_scalar_reads_reject_empty_or_dotted_keys(builder: object, key: str) -> None:
    with pytest.raises(InvalidProgramError):
        builder(key)  # type: ignore[operator]


@pytest.mark.unit
def test_scalar_reads_reject_non_string_keys() -> None:
    with pytest.raises(InvalidProgramError, match="key must be a string"):
        read_string(42)  # type: ignore[arg-type]


@pytest.mark.unit
def test_invalid_program_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        read_int("")


@pytest.mark.unit
def test_read_list_dispatches_on_element_kind_and_program() -> None:
    primitive = read_list("ports", ElementKind.INTEGER)
    by_type = read_list("flags", bool)
    structured = read_list("users", read_string("name"))

    assert isinstance(primitive.node, ReadPrimitiveList)
    assert primitive.node.element_kind is ElementKind.INTEGER
    assert isinstance(by_type.node, ReadPrimitiveList)
    assert by_type.node.element_kind is ElementKind.BOOLEAN
    assert isinstance(structured.node, ReadList)
    assert isinstance(structured.node.item.node, ReadString)


@pytest.mark.unit
@pytest.mark.parametrize("item", [None, "string", float, 3])
def test_read_list_rejects_unknown_item_descriptions(item: object) -> None:
    with pytest.raises(InvalidProgramError):
        read_list("values", item)  # type: ignore[arg-type]


@pytest.mark.unit
def test_read_nested_requires_a_program() -> None:
    with pytest.raises(InvalidProgramError, match="requires a Program"):
        read_nested("server", None)  # type: ignore[arg-type]

    nested = read_nested("server", read_string("host"))
    assert isinstance(nested.node, ReadNested)
    assert nested.node.key == "server"


@pytest.mark.unit
def test_map_and_ap_build_nodes_without_evaluating() -> None:
    calls: list[str] = []

    def record(value: str) -> str:
        calls.append(value)
        return value

    mapped = read_string("host").map(record)
    applied = read_int("port").ap(pure(lambda port: port))

    assert isinstance(mapped.node, Mapped)
    assert isinstance(applied.node, Applied)
    assert calls == []


@pytest.mark.unit
def test_ap_rejects_non_program_argument() -> None:
    with pytest.raises(InvalidProgramError):
        read_int("port").ap(lambda port: port)  # type: ignore[arg-type]


@pytest.mark.unit
def test_map_rejects_non_callable() -> None:
    with pytest.raises(InvalidProgramError):
        read_int("port").map("not callable")  # type: ignore[arg-type]


@pytest.mark.unit
def test_map_n_reject_non_program_arguments_and_non_callables() -> None:
    host = read_string("host")
    with pytest.raises(InvalidProgramError):
        map2(host, "port", lambda a, b: (a, b))  # type: ignore[arg-type]
    with pytest.raises(InvalidProgramError):
        map3(host, host, host, None)  # type: ignore[arg-type]
    with pytest.raises(InvalidProgramError):
        map4(host, host, host, 4, lambda a, b, c, d: a)  # type: ignore[arg-type]
    with pytest.raises(InvalidProgramError):
        map5(host, host, host, host, host, "f")  # type: ignore[arg-type]


@pytest.mark.unit
def test_programs_are_frozen() -> None:
    program = read_string("host")
    with pytest.raises(dataclasses.FrozenInstanceError):
        program.node = read_string("other").node  # type: ignore[misc]


@pytest.mark.unit
def test_program_repr_names_root_node() -> None:
    assert repr(read_string("host")) == "Program(ReadString)"
    assert repr(read_string("host").map(str.upper)) == "Program(Mapped)"
    assert isinstance(pure(1), Program)


@pytest.mark.unit
def test_lift_wraps_a_single_node() -> None:
    program = lift(ReadString("host"))

    assert isinstance(program, Program)
    assert program.describe() == "- host: String\n"
    assert program.node == read_string("host").node
