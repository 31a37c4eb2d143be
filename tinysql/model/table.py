"""Table and ResultSet."""

from __future__ import annotations

from dataclasses import dataclass

from tinysql.model.types import Cell, Column

Row = tuple[Cell, ...]


class Table:
    """A named table: a fixed column list and a growing list of rows."""

    __slots__ = ("_name", "_columns", "_rows")

    def __init__(self, name: str, columns: tuple[Column, ...] = ()) -> None:
        self._name = name
        self._columns = tuple(columns)
        self._rows: list[Row] = []

    @property
    def name(self) -> str:
        """Return the table name."""
        return self._name

    @property
    def columns(self) -> tuple[Column, ...]:
        """Return the columns in declaration order."""
        return self._columns

    @property
    def rows(self) -> tuple[Row, ...]:
        """Return a snapshot of the rows in insertion order."""
        return tuple(self._rows)

    def column_index(self, name: str) -> int | None:
        """Return the position of the named column, or None."""
        for i, column in enumerate(self._columns):
            if column.name == name:
                return i
        return None

    def append(self, row: Row) -> None:
        """Append a row of cells."""
        self._rows.append(tuple(row))

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        cols = ", ".join(f"{c.name} {c.type.value}" for c in self._columns)
        return f"Table({self._name}({cols}), {len(self._rows)} rows)"


@dataclass(frozen=True)
class ResultSet:
    """The output of a SELECT: projected columns and rows aligned to them."""

    columns: tuple[Column, ...] = ()
    rows: tuple[Row, ...] = ()

    def values(self) -> list[list[object]]:
        """Return the rows as lists of decoded Python values."""
        return [[cell.value for cell in row] for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)
