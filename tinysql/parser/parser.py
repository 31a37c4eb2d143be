"""Recursive descent parser for the SQL dialect.

Grammar overview (informal):

  script     := [statement] { ';' [statement] }
  statement  := create | insert | select
  create     := CREATE TABLE ident [ '(' ident type { ',' ident type } ')' ]
  insert     := INSERT INTO ident [ VALUES '(' expr { ',' expr } ')' ]
  select     := SELECT item { ',' item } FROM ident
  item       := '*' | expr [ AS ident ]
  expr       := primary { ('||' | '=') primary }
  primary    := IDENTIFIER | STRING | NUMERIC | '(' expr ')'

Column types are taken as any keyword or identifier token; the executor
decides whether the name is a real type.
"""

from __future__ import annotations

from tinysql.lexer.tokens import Token, TokenType
from tinysql.parser import ast_nodes as ast

_BINARY_OPERATORS = ("||", "=")


class ParseError(Exception):
    """Raised on parse errors."""

    def __init__(self, message: str, token: Token | None) -> None:
        where = f"{token.line}:{token.col}" if token is not None else "end of input"
        super().__init__(f"Parse error at {where}: {message}")
        self.token = token


class Parser:
    """Recursive descent parser for the SQL dialect."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> list[ast.Statement]:
        """Parse the token stream into a list of statements."""
        statements: list[ast.Statement] = []
        while not self._at_end():
            if self._match_symbol(";"):
                continue
            statements.append(self._parse_statement())
            if not self._at_end():
                self._expect_symbol(";")
        return statements

    # --- Token navigation ---

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token | None:
        """Look at the current token without consuming it."""
        if self._at_end():
            return None
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._peek()
        if tok is None:
            raise ParseError("Unexpected end of input", None)
        self._pos += 1
        return tok

    def _match_symbol(self, symbol: str) -> Token | None:
        """Consume the symbol if it is next."""
        tok = self._peek()
        if tok is not None and tok.is_symbol(symbol):
            return self._advance()
        return None

    def _match_keyword(self, word: str) -> Token | None:
        """Consume the keyword if it is next."""
        tok = self._peek()
        if tok is not None and tok.is_keyword(word):
            return self._advance()
        return None

    def _expect_symbol(self, symbol: str) -> Token:
        tok = self._match_symbol(symbol)
        if tok is None:
            raise ParseError(f"Expected {symbol!r}, got {self._describe()}", self._peek())
        return tok

    def _expect_keyword(self, word: str) -> Token:
        tok = self._match_keyword(word)
        if tok is None:
            raise ParseError(
                f"Expected {word.upper()}, got {self._describe()}", self._peek()
            )
        return tok

    def _expect_identifier(self) -> Token:
        tok = self._peek()
        if tok is None or tok.type != TokenType.IDENTIFIER:
            raise ParseError(f"Expected identifier, got {self._describe()}", tok)
        return self._advance()

    def _describe(self) -> str:
        """Describe the current token for error messages."""
        tok = self._peek()
        if tok is None:
            return "end of input"
        return f"{tok.type.name} ({tok.value!r})"

    # --- Statements ---

    def _parse_statement(self) -> ast.Statement:
        tok = self._peek()
        if tok is not None and tok.type == TokenType.KEYWORD:
            if tok.value == "create":
                return self._parse_create_table()
            if tok.value == "insert":
                return self._parse_insert()
            if tok.value == "select":
                return self._parse_select()
        raise ParseError(
            f"Expected CREATE, INSERT or SELECT, got {self._describe()}", tok
        )

    def _parse_create_table(self) -> ast.CreateTable:
        """Parse: CREATE TABLE name [(col type, ...)]."""
        self._expect_keyword("create")
        self._expect_keyword("table")
        name = self._expect_identifier()

        if not self._match_symbol("("):
            return ast.CreateTable(name=name)

        columns: list[ast.ColumnSpec] = []
        while True:
            col_name = self._expect_identifier()
            datatype = self._peek()
            if datatype is None or datatype.type not in (
                TokenType.KEYWORD,
                TokenType.IDENTIFIER,
            ):
                raise ParseError(
                    f"Expected column type, got {self._describe()}", datatype
                )
            self._advance()
            columns.append(ast.ColumnSpec(name=col_name, datatype=datatype))
            if not self._match_symbol(","):
                break
        self._expect_symbol(")")
        return ast.CreateTable(name=name, columns=tuple(columns))

    def _parse_insert(self) -> ast.Insert:
        """Parse: INSERT INTO table [VALUES (expr, ...)]."""
        self._expect_keyword("insert")
        self._expect_keyword("into")
        table = self._expect_identifier()

        if not self._match_keyword("values"):
            return ast.Insert(table=table)

        self._expect_symbol("(")
        values = [self._parse_expr()]
        while self._match_symbol(","):
            values.append(self._parse_expr())
        self._expect_symbol(")")
        return ast.Insert(table=table, values=tuple(values))

    def _parse_select(self) -> ast.Select:
        """Parse: SELECT item, ... FROM source."""
        self._expect_keyword("select")
        items = [self._parse_select_item()]
        while self._match_symbol(","):
            items.append(self._parse_select_item())
        self._expect_keyword("from")
        source = self._expect_identifier()
        return ast.Select(items=tuple(items), source=source)

    def _parse_select_item(self) -> ast.SelectItem:
        star = self._match_symbol("*")
        if star is not None:
            return ast.SelectItem(expr=ast.Star(star))
        expr = self._parse_expr()
        alias = None
        if self._match_keyword("as"):
            alias = self._expect_identifier()
        return ast.SelectItem(expr=expr, alias=alias)

    # --- Expressions ---

    def _parse_expr(self) -> ast.Expr:
        """Parse a left-associative chain of binary operators."""
        left = self._parse_primary()
        while True:
            tok = self._peek()
            if tok is None or tok.type != TokenType.SYMBOL:
                return left
            if tok.value not in _BINARY_OPERATORS:
                return left
            self._advance()
            right = self._parse_primary()
            left = ast.BinaryOp(left=left, op=tok.value, right=right)

    def _parse_primary(self) -> ast.Expr:
        tok = self._peek()
        if tok is not None and tok.type in (
            TokenType.IDENTIFIER,
            TokenType.STRING,
            TokenType.NUMERIC,
        ):
            self._advance()
            return ast.Literal(tok)
        if self._match_symbol("("):
            expr = self._parse_expr()
            self._expect_symbol(")")
            return expr
        raise ParseError(f"Expected expression, got {self._describe()}", tok)
