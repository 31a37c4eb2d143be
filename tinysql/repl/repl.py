"""REPL loop: read-lex-parse-execute-display."""

from __future__ import annotations

import readline  # noqa: F401 — import enables line editing and history for input()
from pathlib import Path

from tinysql.data.loader import load_script
from tinysql.data.sample import load_sample_data
from tinysql.executor.errors import ExecutionError
from tinysql.executor.executor import Executor
from tinysql.lexer.lexer import LexError, tokenize
from tinysql.model.table import ResultSet
from tinysql.parser.parser import Parser, ParseError
from tinysql.repl.formatter import format_result, format_row_count, format_schema


def run_repl(executor: Executor) -> None:
    """Run the interactive REPL."""
    print("tinysql REPL")
    print("Commands: \\load [file.sql], \\tables, \\quit")
    print()

    while True:
        try:
            line = input("tinysql> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        if line.startswith("\\"):
            _handle_command(line, executor)
            continue

        execute_line(line, executor)
        print()


def execute_line(line: str, executor: Executor) -> None:
    """Run every statement on one input line, printing results as they come."""
    try:
        statements = Parser(tokenize(line)).parse()
        for statement in statements:
            print_result(executor.execute(statement))
    except (LexError, ParseError, ExecutionError) as e:
        print(f"Error: {e}")


def print_result(result: ResultSet | None) -> None:
    """Print a SELECT result table, or "ok" for other statements."""
    if result is None:
        print("ok")
        return
    print(format_result(result))
    print(format_row_count(result))


def _handle_command(line: str, executor: Executor) -> None:
    """Handle REPL meta-commands."""
    parts = line.split()
    cmd = parts[0].lower()
    args = parts[1:]

    if cmd in ("\\quit", "\\q"):
        raise SystemExit(0)
    elif cmd == "\\load":
        _cmd_load(args, executor)
    elif cmd == "\\tables":
        _cmd_tables(executor)
    else:
        print(f"Unknown command: {cmd}")


def _cmd_load(args: list[str], executor: Executor) -> None:
    """Handle \\load: load sample data or run a .sql script file."""
    if not args:
        load_sample_data(executor)
        print("Loaded: employees, departments")
        return

    if len(args) > 1:
        print(f"Error: unexpected argument: {args[1]}")
        return

    path = Path(args[0])
    if not path.exists():
        print(f"Error: file not found: {path}")
        return

    try:
        with open(path) as f:
            results = load_script(executor, f)
        print(f"Loaded {path}: {len(results)} statements")
    except (LexError, ParseError, ExecutionError) as e:
        print(f"Error: {e}")
    except OSError as e:
        print(f"Error loading {path}: {e}")


def _cmd_tables(executor: Executor) -> None:
    """Handle \\tables: show every table with its schema and row count."""
    names = executor.store.names()
    if not names:
        print("(no tables)")
        return
    for name in names:
        table = executor.store.lookup(name)
        print(f"  {format_schema(table)}: {len(table)} rows")
