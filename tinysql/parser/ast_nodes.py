"""AST node dataclasses for the SQL parser."""

from __future__ import annotations

from dataclasses import dataclass

from tinysql.lexer.tokens import Token


# --- Expressions ---


@dataclass(frozen=True)
class Literal:
    """A single token used as a value: identifier, string or numeric."""

    token: Token


@dataclass(frozen=True)
class BinaryOp:
    """Binary operation, e.g. ``a || b``.

    op is one of: ||, =
    """

    left: Expr
    op: str
    right: Expr


@dataclass(frozen=True)
class Star:
    """The ``*`` select item: every column of the source table."""

    token: Token


Expr = Literal | BinaryOp


# --- Statement parts ---


@dataclass(frozen=True)
class ColumnSpec:
    """A column definition in CREATE TABLE: name and type token."""

    name: Token
    datatype: Token


@dataclass(frozen=True)
class SelectItem:
    """One projected expression with an optional AS alias."""

    expr: Expr | Star
    alias: Token | None = None


# --- Statements ---


@dataclass(frozen=True)
class CreateTable:
    """CREATE TABLE name [(col type, ...)]."""

    name: Token
    columns: tuple[ColumnSpec, ...] | None = None


@dataclass(frozen=True)
class Insert:
    """INSERT INTO table [VALUES (expr, ...)]."""

    table: Token
    values: tuple[Expr, ...] | None = None


@dataclass(frozen=True)
class Select:
    """SELECT item, ... FROM source."""

    items: tuple[SelectItem, ...]
    source: Token


Statement = CreateTable | Insert | Select
