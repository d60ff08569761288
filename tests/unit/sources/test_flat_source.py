"""
pureconf — unit tests for flat key/value sources

File: tests/unit/sources/test_flat_source.py
Last updated: 2026-10-19

Purpose
- Validate text coercion, list discovery, and argument flattening.

What this test file should cover
- Integer and boolean parsing tables, including malformed input.
- Anchored, de-duplicated, numerically sorted list ids.
- ``-key value`` / ``--flag`` argument handling and its error cases.
"""

from __future__ import annotations

import pytest

from pureconf import ElementKind, FlatSource, MalformedValueError, SourceError, read_string
from pureconf.program import ReadInt
from pureconf.sources import from_args, from_mapping, parse_args


@pytest.mark.unit
def test_strings_are_returned_verbatim_and_missing_keys_are_none() -> None:
    source = FlatSource({"name": "  spaced  "})

    assert source.get_string("name") == "  spaced  "
    assert source.get_string("missing") is None
    assert source.get_integer("missing") is None
    assert source.get_boolean("missing") is None


@pytest.mark.unit
@pytest.mark.parametrize(("text", "expected"), [("42", 42), ("-7", -7), ("+3", 3), (" 9 ", 9)])
def test_integer_parsing(text: str, expected: int) -> None:
    assert FlatSource({"n": text}).get_integer("n") == expected


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "4.2", "0x10", "ten", "1_000"])
def test_malformed_integers_raise(text: str) -> None:
    with pytest.raises(MalformedValueError) as excinfo:
        FlatSource({"n": text}).get_integer("n")

    assert excinfo.value.path == "n"
    assert excinfo.value.expected == "Integer"


@pytest.mark.unit
@pytest.mark.parametrize("text", ["1", "true", "T", "Yes", "y", "ON"])
def test_truthy_booleans(text: str) -> None:
    assert FlatSource({"b": text}).get_boolean("b") is True


@pytest.mark.unit
@pytest.mark.parametrize("text", ["0", "false", "F", "No", "n", "off"])
def test_falsy_booleans(text: str) -> None:
    assert FlatSource({"b": text}).get_boolean("b") is False


@pytest.mark.unit
def test_malformed_boolean_raises() -> None:
    with pytest.raises(MalformedValueError):
        FlatSource({"b": "maybe"}).get_boolean("b")


@pytest.mark.unit
def test_non_string_values_are_stored_as_text() -> None:
    source = from_mapping({"port": 8080, "debug": True})

    assert source.get_string("port") == "8080"
    assert source.get_string("debug") == "true"
    assert source.get_integer("port") == 8080


@pytest.mark.unit
def test_non_string_keys_are_rejected() -> None:
    with pytest.raises(SourceError):
        FlatSource({1: "x"})  # type: ignore[dict-item]


@pytest.mark.unit
def test_list_ids_are_anchored_deduplicated_and_numeric() -> None:
    source = FlatSource(
        {
            "list.10.it": "k",
            "list.2.it": "c",
            "list.2.extra": "c2",
            "list.0.it": "a",
            "list.x.it": "ignored",
            "other.list.5.it": "ignored",
            "listing.1.it": "ignored",
        }
    )

    assert source.get_iterable_nested("list", read_string("it")) == ("0", "2", "10")
    assert source.get_iterable_nested("nothing", read_string("it")) is None


@pytest.mark.unit
def test_primitive_list_elements_are_index_reads() -> None:
    source = FlatSource({"ports.1": "443", "ports.0": "80"})

    elements = source.get_iterable_primitive("ports", ElementKind.INTEGER)

    assert elements == (ReadInt("0"), ReadInt("1"))
    assert source.get_iterable_primitive("absent", ElementKind.INTEGER) is None


@pytest.mark.unit
def test_keys_are_sorted() -> None:
    assert FlatSource({"b": "1", "a.c": "2", "a.b": "3"}).keys() == ("a.b", "a.c", "b")


@pytest.mark.unit
def test_source_is_an_immutable_snapshot() -> None:
    entries = {"name": "before"}
    source = FlatSource(entries)
    entries["name"] = "after"

    assert source.get_string("name") == "before"


@pytest.mark.unit
def test_parse_args_flattens_values_and_flags() -> None:
    argv = ["-server.host", "localhost", "--server.active", "-server.port", "8080"]

    assert parse_args(argv) == {
        "server.host": "localhost",
        "server.active": "true",
        "server.port": "8080",
    }
    source = from_args(argv)
    assert source.get_boolean("server.active") is True
    assert source.get_integer("server.port") == 8080


@pytest.mark.unit
@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["value"], "invalid param"),
        (["-"], "not a valid argument"),
        (["--"], "not a valid argument"),
        (["-host"], "expected a value"),
    ],
)
def test_parse_args_rejects_malformed_arguments(argv: list[str], message: str) -> None:
    with pytest.raises(SourceError, match=message):
        parse_args(argv)
