"""CLI entry point for tinysql."""

import click

from tinysql.cli.eval_cmd import eval_cmd
from tinysql.cli.repl_cmd import repl_cmd


@click.group()
def main() -> None:
    """tinysql in-memory SQL engine."""


main.add_command(repl_cmd)
main.add_command(eval_cmd)
