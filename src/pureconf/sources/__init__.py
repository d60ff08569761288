"""
pureconf sources public API.

File: src/pureconf/sources/__init__.py
Last updated: 2026-10-19

Purpose
- Export the ``Source`` contract and every bundled implementation.

What should be included in this file
- Flat (properties, CLI args, mappings), hierarchical (TOML, YAML, JSON), and
  layered sources, plus the suffix-based loader.
"""

from pureconf.sources.base import Source
from pureconf.sources.document import DocumentSource, from_json, from_toml, from_yaml
from pureconf.sources.flat import FlatSource, from_args, from_mapping, parse_args
from pureconf.sources.layered import LayeredSource
from pureconf.sources.loader import detect_format, load_source, load_sources
from pureconf.sources.properties import from_properties, parse_properties

__all__ = [
    "DocumentSource",
    "FlatSource",
    "LayeredSource",
    "Source",
    "detect_format",
    "from_args",
    "from_json",
    "from_mapping",
    "from_properties",
    "from_toml",
    "from_yaml",
    "load_source",
    "load_sources",
    "parse_args",
    "parse_properties",
]
