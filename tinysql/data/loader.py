"""Script loading: run SQL text or .sql files through the full pipeline."""

from __future__ import annotations

from typing import TextIO

from tinysql.executor.executor import Executor
from tinysql.model.table import ResultSet
from tinysql.lexer.lexer import tokenize
from tinysql.parser.parser import Parser


def run_script(executor: Executor, source: str) -> list[ResultSet | None]:
    """Lex, parse and execute every statement in source.

    Returns one entry per statement: a ResultSet for SELECT, None otherwise.
    Lex and parse errors are raised before any statement runs.
    """
    statements = Parser(tokenize(source)).parse()
    return executor.execute_all(statements)


def load_script(executor: Executor, source: TextIO) -> list[ResultSet | None]:
    """Run a SQL script read from a text stream.

    Errors report the script's own (0-based) line numbers.
    """
    return run_script(executor, source.read())
