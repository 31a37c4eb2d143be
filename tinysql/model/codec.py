"""Cell codec: typed values to byte cells and back."""

from __future__ import annotations

from tinysql.lexer.tokens import Token, TokenType
from tinysql.model.types import INT32, Cell, ColumnType, Value

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def encode(value: Value, column_type: ColumnType) -> Cell:
    """Encode a value as a cell of the given type."""
    if column_type == ColumnType.INT:
        return Cell(ColumnType.INT, INT32.pack(value))
    return Cell(ColumnType.TEXT, value.encode("utf-8"))


def decode(cell: Cell, column_type: ColumnType) -> Value:
    """Decode a cell read from a column of the given type."""
    if cell.type != column_type:
        raise AssertionError(
            f"cannot decode a {cell.type.value} cell as {column_type.value}"
        )
    return cell.value


def is_int32_literal(text: str) -> bool:
    """Check that numeric literal text is a base-10 integer that fits in 32 bits."""
    if not text.isdigit() or not text.isascii():
        return False
    return INT32_MIN <= int(text) <= INT32_MAX


def token_to_cell(token: Token) -> Cell:
    """Convert a numeric or string literal token to a cell.

    The token's own kind picks the encoding. Callers check the token against
    the target column first; anything else reaching here is a bug.
    """
    if token.type == TokenType.NUMERIC:
        if not is_int32_literal(token.value):
            raise AssertionError(f"numeric literal is not an int32: {token.value!r}")
        return encode(int(token.value), ColumnType.INT)
    if token.type == TokenType.STRING:
        return encode(token.value, ColumnType.TEXT)
    raise AssertionError(f"cannot convert {token!r} to a cell")
