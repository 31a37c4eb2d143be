"""Token types, Token and Cursor dataclasses for the SQL lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """The five lexical classes of the SQL dialect."""

    KEYWORD = auto()
    SYMBOL = auto()
    IDENTIFIER = auto()
    STRING = auto()
    NUMERIC = auto()


KEYWORDS: tuple[str, ...] = (
    "select",
    "from",
    "where",
    "as",
    "table",
    "create",
    "insert",
    "into",
    "values",
    "int",
    "text",
)

SYMBOLS: tuple[str, ...] = (
    ";",   # statement terminator
    "*",   # all columns
    ",",
    "(",
    ")",
    "||",  # concatenation
    "=",
)


@dataclass(frozen=True)
class Token:
    """A lexer token with type, normalized value, and 0-based position."""

    type: TokenType
    value: str
    line: int
    col: int

    def is_keyword(self, word: str) -> bool:
        """Return True if this is the given keyword."""
        return self.type == TokenType.KEYWORD and self.value == word

    def is_symbol(self, symbol: str) -> bool:
        """Return True if this is the given symbol."""
        return self.type == TokenType.SYMBOL and self.value == symbol

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"


@dataclass(frozen=True)
class Cursor:
    """A lexing position: offset into the source plus line and column."""

    pointer: int = 0
    line: int = 0
    col: int = 0

    def advance(self, count: int = 1) -> Cursor:
        """Return a cursor moved ``count`` characters along the same line."""
        return Cursor(self.pointer + count, self.line, self.col + count)

    def newline(self) -> Cursor:
        """Return a cursor past a consumed newline character."""
        return Cursor(self.pointer + 1, self.line + 1, 0)
