"""Lexer for the SQL dialect."""

from tinysql.lexer.lexer import LexError, tokenize
from tinysql.lexer.tokens import Cursor, Token, TokenType

__all__ = ["Cursor", "LexError", "Token", "TokenType", "tokenize"]
