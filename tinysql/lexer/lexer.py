"""Lexer for the SQL dialect.

Each sub-lexer is a pure function taking the source and a Cursor. It returns
``(token, cursor)`` on a match, where ``token`` may be None for skipped
whitespace, or None when it does not match. ``tokenize`` tries the sub-lexers
in a fixed priority order at every position.
"""

from __future__ import annotations

import string
from typing import Callable, Optional

from tinysql.lexer.tokens import KEYWORDS, SYMBOLS, Cursor, Token, TokenType

LexResult = Optional[tuple[Optional[Token], Cursor]]
SubLexer = Callable[[str, Cursor], LexResult]

_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_IDENT_CHARS = _ALPHA | _DIGITS | {"$", "_"}


class LexError(Exception):
    """Raised when no sub-lexer matches at a position."""

    def __init__(self, line: int, col: int, hint: str | None = None) -> None:
        after = f" after {hint!r}" if hint is not None else ""
        super().__init__(f"Unable to lex tokens{after} at {line}:{col}")
        self.line = line
        self.col = col
        self.hint = hint


def tokenize(source: str) -> list[Token]:
    """Tokenize the entire source."""
    tokens: list[Token] = []
    cursor = Cursor()
    while cursor.pointer < len(source):
        result = _lex_forward(source, cursor)
        if result is None:
            hint = tokens[-1].value if tokens else None
            raise LexError(cursor.line, cursor.col, hint)
        token, cursor = result
        if token is not None:
            tokens.append(token)
    return tokens


def _lex_forward(source: str, cursor: Cursor) -> LexResult:
    """Return the result of the first sub-lexer that matches at cursor."""
    for lexer in SUB_LEXERS:
        result = lexer(source, cursor)
        if result is not None:
            return result
    return None


def longest_match(source: str, cursor: Cursor, options: tuple[str, ...]) -> str:
    """Return the longest option matching the source at cursor, or "".

    Characters are compared case-insensitively one at a time. An option drops
    out once the text read so far is longer than it or no longer a prefix of
    it. An exact match is remembered and also drops out, so reading continues
    while a longer option (``into`` after ``int``) is still possible.
    """
    value = ""
    retired: set[int] = set()
    match = ""
    pos = cursor.pointer

    while pos < len(source):
        value += source[pos].lower()
        pos += 1

        for i, option in enumerate(options):
            if i in retired:
                continue
            if option == value:
                retired.add(i)
                if len(option) > len(match):
                    match = option
                continue
            if len(value) > len(option) or not option.startswith(value):
                retired.add(i)

        if len(retired) == len(options):
            break

    return match


def lex_keyword(source: str, cursor: Cursor) -> LexResult:
    """Match one of the reserved keywords.

    A keyword directly followed by an identifier character does not match,
    so ``asset`` lexes as one identifier rather than ``as`` + ``set``.
    """
    match = longest_match(source, cursor, KEYWORDS)
    if not match:
        return None
    end = cursor.pointer + len(match)
    if end < len(source) and source[end] in _IDENT_CHARS:
        return None
    token = Token(TokenType.KEYWORD, match, cursor.line, cursor.col)
    return token, cursor.advance(len(match))


def lex_symbol(source: str, cursor: Cursor) -> LexResult:
    """Match a symbol, or consume one whitespace character without a token."""
    ch = source[cursor.pointer]
    if ch == "\n":
        return None, cursor.newline()
    if ch in (" ", "\t"):
        return None, cursor.advance()

    match = longest_match(source, cursor, SYMBOLS)
    if not match:
        return None
    token = Token(TokenType.SYMBOL, match, cursor.line, cursor.col)
    return token, cursor.advance(len(match))


def lex_character_delimited(
    source: str, cursor: Cursor, delimiter: str, ttype: TokenType
) -> LexResult:
    """Read a delimiter-enclosed value; a doubled delimiter is a literal one."""
    if cursor.pointer >= len(source) or source[cursor.pointer] != delimiter:
        return None

    chars: list[str] = []
    pos = cursor.pointer + 1
    while pos < len(source):
        ch = source[pos]
        if ch == delimiter:
            if pos + 1 < len(source) and source[pos + 1] == delimiter:
                chars.append(delimiter)
                pos += 2
                continue
            pos += 1
            token = Token(ttype, "".join(chars), cursor.line, cursor.col)
            return token, cursor.advance(pos - cursor.pointer)
        chars.append(ch)
        pos += 1

    # Unterminated.
    return None


def lex_string(source: str, cursor: Cursor) -> LexResult:
    """Match a single-quoted string literal."""
    return lex_character_delimited(source, cursor, "'", TokenType.STRING)


def lex_numeric(source: str, cursor: Cursor) -> LexResult:
    """Match a numeric literal such as 105, 123., .1 or 1.1e-2.

    A second period, a second exponent marker, or a period after the
    exponent fails the whole literal rather than ending it early.
    """
    start = cursor.pointer
    if start >= len(source):
        return None
    first = source[start]
    if first not in _DIGITS and first != ".":
        return None

    period_found = first == "."
    exp_found = False
    mantissa_digits = first in _DIGITS
    exponent_digits = False

    pos = start + 1
    while pos < len(source):
        ch = source[pos]
        if ch == ".":
            if period_found:
                return None
            period_found = True
        elif ch == "e":
            if exp_found:
                return None
            # No period may follow the exponent marker.
            period_found = True
            exp_found = True
            if pos + 1 < len(source) and source[pos + 1] in ("+", "-"):
                pos += 1
        elif ch in _DIGITS:
            if exp_found:
                exponent_digits = True
            else:
                mantissa_digits = True
        else:
            break
        pos += 1

    if not mantissa_digits or (exp_found and not exponent_digits):
        return None

    token = Token(TokenType.NUMERIC, source[start:pos], cursor.line, cursor.col)
    return token, cursor.advance(pos - start)


def lex_identifier(source: str, cursor: Cursor) -> LexResult:
    """Match a quoted identifier (case kept) or a bare one (lower-cased)."""
    quoted = lex_character_delimited(source, cursor, '"', TokenType.IDENTIFIER)
    if quoted is not None:
        return quoted

    start = cursor.pointer
    if source[start] not in _ALPHA:
        return None
    pos = start + 1
    while pos < len(source) and source[pos] in _IDENT_CHARS:
        pos += 1

    value = source[start:pos].lower()
    token = Token(TokenType.IDENTIFIER, value, cursor.line, cursor.col)
    return token, cursor.advance(pos - start)


SUB_LEXERS: tuple[SubLexer, ...] = (
    lex_keyword,
    lex_symbol,
    lex_string,
    lex_numeric,
    lex_identifier,
)
