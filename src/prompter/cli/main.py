"""Prompter CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from prompter import __version__


@click.group()
@click.version_option(version=__version__, prog_name="prompter")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Prompter - ask questions from shell scripts.

    Prompts are written to stderr and the answer to stdout, so the answer
    can be captured with $(prompter ask ...).
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from prompter.cli.ask import ask, password  # noqa: E402
from prompter.cli.confirm import confirm  # noqa: E402

cli.add_command(ask)
cli.add_command(password)
cli.add_command(confirm)


def main() -> None:
    cli()
