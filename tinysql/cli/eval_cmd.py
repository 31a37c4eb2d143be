"""CLI subcommand: eval."""

import click

from tinysql.cli.options import make_executor, run_files, session_options
from tinysql.data.loader import run_script
from tinysql.data.sample import load_sample_data
from tinysql.executor.errors import ExecutionError
from tinysql.lexer.lexer import LexError
from tinysql.parser.parser import ParseError
from tinysql.repl.formatter import format_result


@click.command("eval")
@click.argument("expression")
@click.argument("files", nargs=-1, type=click.Path())
@session_options
def eval_cmd(
    expression: str,
    files: tuple[str, ...],
    sample: bool,
    on_duplicate: str,
    verbose: bool,
) -> None:
    """Evaluate SQL statements and print each SELECT result.

    FILES are .sql scripts run first, in order, against the same store.
    """
    executor = make_executor(on_duplicate, verbose)

    if sample:
        load_sample_data(executor)
    run_files(executor, files)

    try:
        for result in run_script(executor, expression):
            if result is not None:
                click.echo(format_result(result))
    except (LexError, ParseError, ExecutionError) as e:
        raise click.ClickException(str(e))
