"""Unit tests for Java-style ``.properties`` parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from pureconf import SourceError
from pureconf.sources import from_properties, parse_properties


@pytest.mark.unit
def test_separators_comments_and_blank_lines() -> None:
    text = "\n".join(
        [
            "# comment",
            "! also a comment",
            "",
            "server.host=localhost",
            "server.port : 8080",
            "server.active true",
            "   indented = yes",
            "empty=",
        ]
    )

    assert parse_properties(text) == {
        "server.host": "localhost",
        "server.port": "8080",
        "server.active": "true",
        "indented": "yes",
        "empty": "",
    }


@pytest.mark.unit
def test_line_continuations_join_logical_lines() -> None:
    text = "greeting = hello \\\n           world\nnext=1\n"

    assert parse_properties(text) == {"greeting": "hello world", "next": "1"}


@pytest.mark.unit
def test_escaped_trailing_backslash_is_not_a_continuation() -> None:
    assert parse_properties("path=C:\\\\\nother=2") == {"path": "C:\\", "other": "2"}


@pytest.mark.unit
def test_escape_sequences_and_escaped_separators() -> None:
    text = "tab=a\\tb\nunicode=\\u00e9t\\u00e9\nkey\\=with\\:seps=v\nplain\\q=x"

    assert parse_properties(text) == {
        "tab": "a\tb",
        "unicode": "été",
        "key=with:seps": "v",
        "plainq": "x",
    }


@pytest.mark.unit
def test_later_duplicates_override_earlier_ones() -> None:
    assert parse_properties("a=1\na=2") == {"a": "2"}


@pytest.mark.unit
def test_malformed_unicode_escape_raises_value_error() -> None:
    with pytest.raises(ValueError, match="uXXXX"):
        parse_properties("bad=\\u12")


@pytest.mark.unit
def test_from_properties_loads_a_flat_source(tmp_path: Path) -> None:
    path = tmp_path / "app.properties"
    path.write_text("list.0.it=a\nlist.1.it=b\n", encoding="utf-8")

    source = from_properties(path)

    assert source.keys() == ("list.0.it", "list.1.it")
    assert source.get_string("list.1.it") == "b"


@pytest.mark.unit
def test_from_properties_wraps_errors(tmp_path: Path) -> None:
    with pytest.raises(SourceError, match="unable to read"):
        from_properties(tmp_path / "missing.properties")

    broken = tmp_path / "broken.properties"
    broken.write_text("x=\\uZZZZ\n", encoding="utf-8")
    with pytest.raises(SourceError, match="invalid properties"):
        from_properties(broken)
