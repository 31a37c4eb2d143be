"""Statement executor for the in-memory table store.

Executes parsed statements against a TableStore.
Uses isinstance dispatch (visitor-style without accept methods).
"""

from __future__ import annotations

import logging

from tinysql.config import DuplicateTablePolicy, Settings
from tinysql.executor.errors import (
    ColumnNotFound,
    ExecutionError,
    InvalidDatatype,
    MissingValues,
    TableAlreadyExists,
    TableNotFound,
    TypeMismatch,
)
from tinysql.executor.store import TableStore
from tinysql.lexer.tokens import Token, TokenType
from tinysql.model.codec import is_int32_literal, token_to_cell
from tinysql.model.table import ResultSet, Row, Table
from tinysql.model.types import Cell, Column, ColumnType
from tinysql.parser import ast_nodes as ast

logger = logging.getLogger(__name__)

# Which literal kind each column type accepts.
_LITERAL_KINDS: dict[ColumnType, TokenType] = {
    ColumnType.INT: TokenType.NUMERIC,
    ColumnType.TEXT: TokenType.STRING,
}


class Executor:
    """Executes CREATE TABLE, INSERT and SELECT statements."""

    def __init__(self, store: TableStore, settings: Settings | None = None) -> None:
        self._store = store
        self._settings = settings if settings is not None else Settings()

    @property
    def store(self) -> TableStore:
        """Return the table store."""
        return self._store

    @property
    def settings(self) -> Settings:
        """Return the execution settings."""
        return self._settings

    def execute(self, node: ast.Statement) -> ResultSet | None:
        """Execute one statement.

        Returns a ResultSet for SELECT and None for CREATE TABLE and INSERT.
        """
        if isinstance(node, ast.CreateTable):
            self.create_table(node)
            return None
        if isinstance(node, ast.Insert):
            self.insert(node)
            return None
        if isinstance(node, ast.Select):
            return self.select(node)
        raise ExecutionError(f"Unknown statement type: {type(node).__name__}")

    def execute_all(self, nodes: list[ast.Statement]) -> list[ResultSet | None]:
        """Execute statements in order, stopping at the first error."""
        return [self.execute(node) for node in nodes]

    # --- Statements ---

    def create_table(self, node: ast.CreateTable) -> None:
        """Create (or, by policy, replace) a table."""
        name = node.name.value
        if (
            name in self._store
            and self._settings.on_duplicate_table == DuplicateTablePolicy.ERROR
        ):
            raise TableAlreadyExists(name)

        columns: list[Column] = []
        for spec in node.columns or ():
            column_type = ColumnType.from_name(spec.datatype.value)
            if column_type is None:
                raise InvalidDatatype(spec.datatype.value, spec.name.value)
            columns.append(Column(spec.name.value, column_type))

        if name in self._store:
            logger.debug("Replacing table %r", name)
        self._store.add(Table(name, tuple(columns)))
        logger.debug("Created table %r with %d columns", name, len(columns))

    def insert(self, node: ast.Insert) -> None:
        """Append one row to a table."""
        table = self._lookup(node.table.value)
        if node.values is None:
            return

        if len(node.values) != len(table.columns):
            raise MissingValues(
                f"Table {table.name!r} has {len(table.columns)} columns "
                f"but {len(node.values)} values were given"
            )

        row: list[Cell] = []
        for column, expr in zip(table.columns, node.values):
            if not isinstance(expr, ast.Literal):
                logger.warning(
                    "Skipping non-literal value for column %r of %r",
                    column.name,
                    table.name,
                )
                continue
            row.append(self._literal_to_cell(expr.token, column, table))

        table.append(tuple(row))
        logger.debug("Inserted row into %r (%d rows)", table.name, len(table))

    def select(self, node: ast.Select) -> ResultSet:
        """Project every row of a table, in insertion order."""
        table = self._lookup(node.source.value)

        columns: list[Column] = []
        indexes: list[int] = []
        for item in node.items:
            if isinstance(item.expr, ast.Star):
                columns.extend(table.columns)
                indexes.extend(range(len(table.columns)))
                continue
            if not isinstance(item.expr, ast.Literal):
                logger.warning("Skipping non-literal select item in %r", table.name)
                continue

            token = item.expr.token
            if token.type != TokenType.IDENTIFIER:
                raise ColumnNotFound(token.value, table.name)
            index = table.column_index(token.value)
            if index is None:
                raise ColumnNotFound(token.value, table.name)

            name = item.alias.value if item.alias is not None else token.value
            columns.append(Column(name, table.columns[index].type))
            indexes.append(index)

        rows = tuple(self._project(row, indexes, table) for row in table.rows)
        logger.debug("Selected %d rows from %r", len(rows), table.name)
        return ResultSet(columns=tuple(columns), rows=rows)

    # --- Helpers ---

    def _lookup(self, name: str) -> Table:
        try:
            return self._store.lookup(name)
        except KeyError:
            raise TableNotFound(name)

    def _literal_to_cell(self, token: Token, column: Column, table: Table) -> Cell:
        """Check a literal against its column, then encode it."""
        if token.type == TokenType.IDENTIFIER:
            raise ColumnNotFound(token.value, table.name)
        if token.type != _LITERAL_KINDS[column.type]:
            raise TypeMismatch(
                f"Column {column.name!r} is {column.type.value}, "
                f"got {token.type.name.lower()} literal {token.value!r}"
            )
        if column.type == ColumnType.INT and not is_int32_literal(token.value):
            raise TypeMismatch(
                f"Column {column.name!r} is int, "
                f"got {token.value!r} which is not a 32-bit integer"
            )
        return token_to_cell(token)

    def _project(self, row: Row, indexes: list[int], table: Table) -> Row:
        """Pick the projected cells out of a stored row."""
        # A skipped insert value shifts every later cell left, so no position
        # in a short row can be trusted.
        if indexes and len(row) != len(table.columns):
            raise MissingValues(f"A row of {table.name!r} is missing values")
        return tuple(row[i] for i in indexes)
