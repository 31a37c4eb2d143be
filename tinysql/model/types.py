"""Core types: ColumnType, Column and Cell."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Union

# A decoded cell value.
Value = Union[int, str]

# Layout of an INT cell: a big-endian signed 32-bit integer.
INT32 = struct.Struct(">i")


class ColumnType(Enum):
    """Declared column types, valued by their SQL type names."""

    INT = "int"
    TEXT = "text"

    @classmethod
    def from_name(cls, name: str) -> ColumnType | None:
        """Return the type for a (lower-case) SQL type name, or None."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class Column:
    """A named, typed column of a table or result set."""

    name: str
    type: ColumnType


@dataclass(frozen=True)
class Cell:
    """One stored value: raw bytes tagged with the type they encode.

    INT cells are four big-endian bytes; TEXT cells are bare UTF-8 with no
    length prefix, so the tag is the only way to read them.
    """

    type: ColumnType
    data: bytes

    @property
    def value(self) -> Value:
        """Decode the cell using its own type tag."""
        if self.type == ColumnType.INT:
            return INT32.unpack(self.data)[0]
        return self.data.decode("utf-8")

    def __repr__(self) -> str:
        return f"Cell({self.type.name}, {self.value!r})"
