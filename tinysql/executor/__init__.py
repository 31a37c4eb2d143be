"""Executor for SQL statements against an in-memory store."""

from tinysql.executor.errors import (
    ColumnNotFound,
    ExecutionError,
    InvalidDatatype,
    MissingValues,
    TableAlreadyExists,
    TableNotFound,
    TypeMismatch,
)
from tinysql.executor.executor import Executor
from tinysql.executor.store import TableStore

__all__ = [
    "ColumnNotFound",
    "ExecutionError",
    "Executor",
    "InvalidDatatype",
    "MissingValues",
    "TableAlreadyExists",
    "TableNotFound",
    "TableStore",
    "TypeMismatch",
]
