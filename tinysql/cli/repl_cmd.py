"""CLI subcommand: repl."""

import click

from tinysql.cli.options import make_executor, run_files, session_options
from tinysql.data.sample import load_sample_data
from tinysql.repl.repl import run_repl


@click.command("repl")
@click.argument("files", nargs=-1, type=click.Path())
@session_options
def repl_cmd(
    files: tuple[str, ...],
    sample: bool,
    on_duplicate: str,
    verbose: bool,
) -> None:
    """Start the interactive REPL.

    Optionally run .sql script files before entering the REPL.
    """
    executor = make_executor(on_duplicate, verbose)

    if sample:
        load_sample_data(executor)
        click.echo("Sample data loaded: employees, departments")
    run_files(executor, files)

    names = executor.store.names()
    if names:
        click.echo(f"Tables: {', '.join(names)}")

    run_repl(executor)
