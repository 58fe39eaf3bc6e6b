"""CLI commands: prompter ask / prompter password -- read a line from stdin."""

from __future__ import annotations

import click

from prompter import validators
from prompter.cli._common import build_prompter, cancel_after, exit_on_error, timeout_option
from prompter.question import Question


def _configure(
    question: Question,
    default: str | None,
    optional: bool,
    min_length: int | None,
    choices: tuple[str, ...] = (),
    pattern: str | None = None,
) -> Question:
    if default:
        question = question.with_default(default)
    if optional:
        question = question.with_optional()
    if min_length:
        question = question.with_validators(validators.min_length(min_length))
    if choices:
        question = question.with_validators(validators.one_of(*choices))
    if pattern:
        question = question.with_validators(validators.matches(pattern))
    return question


@click.command()
@click.argument("prompt")
@click.option("--default", default=None, help="Answer used when the input is empty")
@click.option("--optional", is_flag=True, help="Accept an empty answer")
@click.option("--min-length", type=click.IntRange(min=1), default=None, help="Minimum answer length")
@click.option("--choice", "choices", multiple=True, help="Allowed answer (repeatable)")
@click.option("--pattern", default=None, help="Regular expression the answer must match")
@timeout_option
def ask(
    prompt: str,
    default: str | None,
    optional: bool,
    min_length: int | None,
    choices: tuple[str, ...],
    pattern: str | None,
    timeout: float | None,
) -> None:
    """Ask PROMPT and print the answer to stdout."""
    prompter = build_prompter()
    question = _configure(
        prompter.question(), default, optional, min_length, choices, pattern
    )
    with exit_on_error(), cancel_after(timeout) as controller:
        answer = question.ask(prompt, controller.token)
    click.echo(answer)


@click.command()
@click.argument("prompt")
@click.option("--default", default=None, help="Answer used when the input is empty")
@click.option("--optional", is_flag=True, help="Accept an empty answer")
@click.option("--min-length", type=click.IntRange(min=1), default=None, help="Minimum answer length")
@timeout_option
def password(
    prompt: str,
    default: str | None,
    optional: bool,
    min_length: int | None,
    timeout: float | None,
) -> None:
    """Ask PROMPT without echoing the answer and print it to stdout."""
    prompter = build_prompter()
    question = _configure(prompter.question(), default, optional, min_length)
    with exit_on_error(), cancel_after(timeout) as controller:
        answer = question.password(prompt, controller.token)
    click.echo(answer)
