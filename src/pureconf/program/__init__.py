"""Program construction API: expression nodes, key paths, and applicative builders."""

from pureconf.program.expr import (
    ElementKind,
    Expr,
    Pure,
    ReadBool,
    ReadInt,
    ReadList,
    ReadNested,
    ReadPrimitiveList,
    ReadString,
    ScalarRead,
    scalar_read,
)
from pureconf.program.key_path import KeyPath
from pureconf.program.program import (
    Applied,
    Mapped,
    Program,
    lift,
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

__all__ = [
    "Applied",
    "ElementKind",
    "Expr",
    "KeyPath",
    "Mapped",
    "Program",
    "Pure",
    "ReadBool",
    "ReadInt",
    "ReadList",
    "ReadNested",
    "ReadPrimitiveList",
    "ReadString",
    "ScalarRead",
    "lift",
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
    "scalar_read",
]
