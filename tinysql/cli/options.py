"""Options and setup shared by the CLI subcommands."""

from __future__ import annotations

from typing import Callable

import click

from tinysql.config import DuplicateTablePolicy, Settings, configure_logging
from tinysql.data.loader import load_script
from tinysql.executor.errors import ExecutionError
from tinysql.executor.executor import Executor
from tinysql.executor.store import TableStore
from tinysql.lexer.lexer import LexError
from tinysql.parser.parser import ParseError


def session_options(fn: Callable) -> Callable:
    """Attach --sample, --on-duplicate and --verbose to a command."""
    fn = click.option(
        "--verbose", "-v", is_flag=True, default=False, help="Log each statement (DEBUG)."
    )(fn)
    fn = click.option(
        "--on-duplicate",
        type=click.Choice([p.value for p in DuplicateTablePolicy]),
        default=DuplicateTablePolicy.REPLACE.value,
        show_default=True,
        envvar="TINYSQL_ON_DUPLICATE",
        help="CREATE TABLE on an existing name: replace it or fail.",
    )(fn)
    fn = click.option(
        "--sample", is_flag=True, default=False, help="Load sample data (employees, departments)."
    )(fn)
    return fn


def make_executor(on_duplicate: str, verbose: bool) -> Executor:
    """Configure logging and build an executor over a fresh store."""
    configure_logging(verbose)
    settings = Settings(on_duplicate_table=DuplicateTablePolicy(on_duplicate))
    return Executor(TableStore(), settings)


def run_files(executor: Executor, files: tuple[str, ...]) -> None:
    """Run .sql script files in order."""
    for filepath in files:
        try:
            with open(filepath) as f:
                load_script(executor, f)
        except OSError as e:
            raise click.ClickException(f"Cannot read {filepath}: {e}")
        except (LexError, ParseError, ExecutionError) as e:
            raise click.ClickException(f"{filepath}: {e}")
