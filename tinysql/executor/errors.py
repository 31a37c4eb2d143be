"""Errors raised while executing statements."""

from __future__ import annotations


class ExecutionError(Exception):
    """Raised on execution errors."""


class TableNotFound(ExecutionError):
    """The statement names a table that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Table does not exist: {name!r}")
        self.name = name


class TableAlreadyExists(ExecutionError):
    """CREATE TABLE on an existing name while duplicates are rejected."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Table already exists: {name!r}")
        self.name = name


class ColumnNotFound(ExecutionError):
    """The statement names a column the table does not have."""

    def __init__(self, name: str, table: str) -> None:
        super().__init__(f"Column does not exist: {name!r} in table {table!r}")
        self.name = name
        self.table = table


class InvalidDatatype(ExecutionError):
    """A column was declared with a type other than int or text."""

    def __init__(self, datatype: str, column: str) -> None:
        super().__init__(f"Invalid datatype {datatype!r} for column {column!r}")
        self.datatype = datatype
        self.column = column


class MissingValues(ExecutionError):
    """The number of values does not match the number of columns."""


class TypeMismatch(ExecutionError):
    """A literal's kind does not match its target column's type."""
