"""Tests for the lexer."""

import pytest

from tinysql.lexer.lexer import (
    LexError,
    lex_identifier,
    lex_keyword,
    lex_numeric,
    lex_string,
    lex_symbol,
    longest_match,
    tokenize,
)
from tinysql.lexer.tokens import KEYWORDS, SYMBOLS, Cursor, TokenType


def types(source: str) -> list[TokenType]:
    """Helper: return token types."""
    return [t.type for t in tokenize(source)]


def values(source: str) -> list[str]:
    """Helper: return token values."""
    return [t.value for t in tokenize(source)]


class TestNumeric:
    """Test the numeric sub-lexer."""

    @pytest.mark.parametrize(
        "number",
        [
            "105",
            "123.",
            "123.145",
            "1e5",
            "1.e21",
            "1.1e2",
            "1.1e-2",
            "1.1e+2",
            "1e-1",
            ".1",
            "0.105",
            "1.105",
        ],
    )
    def test_valid(self, number: str) -> None:
        result = lex_numeric(number, Cursor())
        assert result is not None
        token, cursor = result
        assert token.type == TokenType.NUMERIC
        assert token.value == number
        assert cursor.pointer == len(number)

    @pytest.mark.parametrize("number", ["e4", "1..", "1ee4", " 1", ".", "1e", "1e+", "1.1e.5"])
    def test_invalid(self, number: str) -> None:
        assert lex_numeric(number, Cursor()) is None

    def test_stops_at_non_numeric(self) -> None:
        token, cursor = lex_numeric("42)", Cursor())
        assert token.value == "42"
        assert cursor.pointer == 2
        assert cursor.col == 2


class TestIdentifier:
    """Test the identifier sub-lexer."""

    @pytest.mark.parametrize(
        "source,value",
        [
            ("a", "a"),
            ("abc", "abc"),
            ("abc ", "abc"),
            ('" abc "', " abc "),
            ("a9$", "a9$"),
            ("dept_id", "dept_id"),
            ("userName", "username"),
            ('"userName"', "userName"),
            ('"a""b"', 'a"b'),
        ],
    )
    def test_valid(self, source: str, value: str) -> None:
        result = lex_identifier(source, Cursor())
        assert result is not None
        token, _ = result
        assert token.type == TokenType.IDENTIFIER
        assert token.value == value

    @pytest.mark.parametrize("source", ['"', "_sadsfa", "9sadsfa", " abc"])
    def test_invalid(self, source: str) -> None:
        assert lex_identifier(source, Cursor()) is None


class TestKeyword:
    """Test the keyword sub-lexer."""

    @pytest.mark.parametrize(
        "source,value",
        [
            ("select ", "select"),
            ("from", "from"),
            ("as", "as"),
            ("SELECT", "select"),
            ("into", "into"),
            ("int,", "int"),
            ("Values(", "values"),
        ],
    )
    def test_valid(self, source: str, value: str) -> None:
        result = lex_keyword(source, Cursor())
        assert result is not None
        token, cursor = result
        assert token.type == TokenType.KEYWORD
        assert token.value == value
        assert cursor.col == len(value)

    @pytest.mark.parametrize("source", [" into", "flubbrety", "users", "asset", "intval"])
    def test_invalid(self, source: str) -> None:
        assert lex_keyword(source, Cursor()) is None


class TestString:
    """Test the string sub-lexer."""

    @pytest.mark.parametrize(
        "source,value",
        [
            ("'abc'", "abc"),
            ("'ab c'", "ab c"),
            ("'b'", "b"),
            ("''", ""),
            ("'a '' b'", "a ' b"),
            ("'Mixed Case'", "Mixed Case"),
        ],
    )
    def test_valid(self, source: str, value: str) -> None:
        result = lex_string(source, Cursor())
        assert result is not None
        token, cursor = result
        assert token.type == TokenType.STRING
        assert token.value == value
        assert cursor.pointer == len(source)
        assert cursor.col == len(source)

    @pytest.mark.parametrize("source", ["a", "'", "", " 'foo'", "'abc"])
    def test_invalid(self, source: str) -> None:
        assert lex_string(source, Cursor()) is None


class TestSymbol:
    """Test the symbol sub-lexer, including whitespace skipping."""

    @pytest.mark.parametrize("source,value", [("= ", "="), ("||", "||"), (";", ";"), ("*", "*")])
    def test_valid(self, source: str, value: str) -> None:
        token, _ = lex_symbol(source, Cursor())
        assert token.type == TokenType.SYMBOL
        assert token.value == value

    def test_single_pipe_is_not_a_symbol(self) -> None:
        assert lex_symbol("|", Cursor()) is None

    def test_space_consumed_without_token(self) -> None:
        token, cursor = lex_symbol(" x", Cursor())
        assert token is None
        assert cursor == Cursor(1, 0, 1)

    def test_tab_consumed_without_token(self) -> None:
        token, cursor = lex_symbol("\tx", Cursor())
        assert token is None
        assert cursor == Cursor(1, 0, 1)

    def test_newline_moves_to_next_line(self) -> None:
        token, cursor = lex_symbol("\nx", Cursor(0, 0, 5))
        assert token is None
        assert cursor == Cursor(1, 1, 0)


class TestLongestMatch:
    """Test longest-match disambiguation."""

    def test_into_beats_int(self) -> None:
        assert longest_match("into", Cursor(), KEYWORDS) == "into"

    def test_int_kept_when_into_fails(self) -> None:
        assert longest_match("inta", Cursor(), KEYWORDS) == "int"
        assert longest_match("int ", Cursor(), KEYWORDS) == "int"

    def test_case_insensitive(self) -> None:
        assert longest_match("InSeRt", Cursor(), KEYWORDS) == "insert"

    def test_prefix_only_is_no_match(self) -> None:
        assert longest_match("ins", Cursor(), KEYWORDS) == ""

    def test_double_pipe(self) -> None:
        assert longest_match("||", Cursor(), SYMBOLS) == "||"

    def test_starts_at_cursor(self) -> None:
        assert longest_match("x from", Cursor(2, 0, 2), KEYWORDS) == "from"


class TestTokenize:
    """Test tokenizing full statements."""

    def test_into_is_one_keyword(self) -> None:
        tokens = tokenize("into")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.KEYWORD
        assert tokens[0].value == "into"

    def test_positions(self) -> None:
        tokens = tokenize("select id from users;")
        assert [t.col for t in tokens] == [0, 7, 10, 15, 20]
        assert all(t.line == 0 for t in tokens)
        assert types("select id from users;") == [
            TokenType.KEYWORD,
            TokenType.IDENTIFIER,
            TokenType.KEYWORD,
            TokenType.IDENTIFIER,
            TokenType.SYMBOL,
        ]

    def test_newline_positions(self) -> None:
        tokens = tokenize("select id\nfrom users")
        assert [(t.line, t.col) for t in tokens] == [(0, 0), (0, 7), (1, 0), (1, 5)]

    def test_string_width_counts_escapes(self) -> None:
        tokens = tokenize("'a '' b' x")
        assert tokens[0].value == "a ' b"
        assert tokens[1].col == 9

    def test_create_table(self) -> None:
        src = "CREATE TABLE u (id INT, name TEXT)"
        assert values(src) == [
            "create", "table", "u", "(", "id", "int", ",", "name", "text", ")",
        ]
        assert types(src) == [
            TokenType.KEYWORD, TokenType.KEYWORD, TokenType.IDENTIFIER,
            TokenType.SYMBOL, TokenType.IDENTIFIER, TokenType.KEYWORD,
            TokenType.SYMBOL, TokenType.IDENTIFIER, TokenType.KEYWORD,
            TokenType.SYMBOL,
        ]

    def test_insert(self) -> None:
        src = "insert into u values (105, 'Dan')"
        assert values(src) == ["insert", "into", "u", "values", "(", "105", ",", "Dan", ")"]
        assert types(src)[5] == TokenType.NUMERIC
        assert types(src)[7] == TokenType.STRING

    def test_identifiers_starting_with_keywords(self) -> None:
        assert types("asset intval users") == [TokenType.IDENTIFIER] * 3

    def test_concatenation(self) -> None:
        assert values("a || 'b'") == ["a", "||", "b"]

    def test_multiple_statements(self) -> None:
        assert values("select a from t; select b from t;").count(";") == 2

    def test_empty_source(self) -> None:
        assert tokenize("") == []
        assert tokenize("  \n\t") == []


class TestLexErrors:
    """Test lexical failures."""

    def test_unknown_character_with_hint(self) -> None:
        with pytest.raises(LexError, match="after 'select' at 0:7") as exc_info:
            tokenize("select @")
        assert exc_info.value.line == 0
        assert exc_info.value.col == 7
        assert exc_info.value.hint == "select"

    def test_unknown_character_without_hint(self) -> None:
        with pytest.raises(LexError, match="Unable to lex tokens at 0:0") as exc_info:
            tokenize("@")
        assert exc_info.value.hint is None

    def test_unterminated_string(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("select 'abc")
        assert exc_info.value.col == 7

    def test_error_on_second_line(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("select a\nfrom #")
        assert (exc_info.value.line, exc_info.value.col) == (1, 5)
