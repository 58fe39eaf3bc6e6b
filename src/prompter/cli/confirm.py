"""CLI command: prompter confirm -- ask a yes/no question."""

from __future__ import annotations

import sys

import click

from prompter.cli._common import EXIT_NO, build_prompter, cancel_after, exit_on_error, timeout_option


@click.command()
@click.argument("prompt")
@click.option(
    "--default",
    type=click.Choice(["yes", "no"], case_sensitive=False),
    default=None,
    help="Answer used when the input is empty",
)
@timeout_option
def confirm(prompt: str, default: str | None, timeout: float | None) -> None:
    """Ask PROMPT as a yes/no question.

    Exits 0 for yes and 1 for no.
    """
    prompter = build_prompter()
    question = prompter.question()
    if default:
        question = question.with_default(default)
    with exit_on_error(), cancel_after(timeout) as controller:
        confirmed = question.confirm(prompt, controller.token)
    if not confirmed:
        sys.exit(EXIT_NO)
