"""Data model: column types, cells, tables and result sets."""

from tinysql.model.table import ResultSet, Table
from tinysql.model.types import Cell, Column, ColumnType, Value

__all__ = ["Cell", "Column", "ColumnType", "ResultSet", "Table", "Value"]
