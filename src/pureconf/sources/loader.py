"""File-format dispatch for sources loaded from disk."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

from pureconf.constants import SOURCE_FORMATS, SUFFIX_FORMATS
from pureconf.errors import SourceError
from pureconf.sources.base import Source
from pureconf.sources.document import from_json, from_toml, from_yaml
from pureconf.sources.layered import LayeredSource
from pureconf.sources.properties import from_properties

_LOADERS: Final[dict[str, Callable[[Path], Source]]] = {
    "properties": from_properties,
    "toml": from_toml,
    "yaml": from_yaml,
    "json": from_json,
}


def detect_format(path: str | Path) -> str:
    suffix = Path(path).suffix.lower()
    detected = SUFFIX_FORMATS.get(suffix)
    if detected is None:
        supported = ", ".join(sorted(SUFFIX_FORMATS))
        raise SourceError(
            f"cannot infer source format of {path} (supported suffixes: {supported})"
        )
    return detected


def load_source(path: str | Path, source_format: str | None = None) -> Source:
    """Load one source file, inferring the format from its suffix when not given."""

    resolved = Path(path).expanduser()
    selected = detect_format(resolved) if source_format is None else source_format.strip().lower()
    if selected not in SOURCE_FORMATS:
        expected = ", ".join(SOURCE_FORMATS)
        raise SourceError(
            f"unsupported source format {source_format!r}; expected one of {expected}"
        )
    if not resolved.exists():
        raise SourceError(f"source file not found: {resolved}")
    return _LOADERS[selected](resolved)


def load_sources(paths: Sequence[str | Path], source_format: str | None = None) -> Source:
    """Load several files into one source; earlier paths take precedence."""

    if not paths:
        raise SourceError("at least one source path is required")
    loaded = [load_source(path, source_format) for path in paths]
    if len(loaded) == 1:
        return loaded[0]
    return LayeredSource(*loaded)


__all__ = ["detect_format", "load_source", "load_sources"]
