"""TableStore: the named tables of one session."""

from __future__ import annotations

from tinysql.model.table import Table


class TableStore:
    """A mutable mapping of table names to Tables.

    Names are case-sensitive. Tables are added or replaced, never removed.
    """

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    def add(self, table: Table) -> None:
        """Register a table, replacing any table of the same name."""
        self._tables[table.name] = table

    def lookup(self, name: str) -> Table:
        """Look up a table by name."""
        if name not in self._tables:
            raise KeyError(f"Unknown table: {name!r}")
        return self._tables[name]

    def names(self) -> list[str]:
        """Return all table names, sorted."""
        return sorted(self._tables.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._tables

    def __len__(self) -> int:
        return len(self._tables)
