"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator

import click

from prompter.cancel import CancelController
from prompter.config import PrompterConfig
from prompter.errors import CancelledError, RequiredInputError, StreamError
from prompter.session import Prompter

EXIT_NO = 1
EXIT_REQUIRED = 2
EXIT_STREAM = 3
EXIT_CANCELLED = 130

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Give up after this many seconds",
)


def build_prompter() -> Prompter:
    """Prompter writing prompts to stderr and reading answers from stdin."""
    return Prompter(sys.stderr, sys.stdin, PrompterConfig.from_env())


@contextmanager
def cancel_after(timeout: float | None) -> Iterator[CancelController]:
    controller = CancelController()
    if timeout is not None:
        controller.cancel_after(timeout, reason=f"no answer within {timeout:g}s")
    try:
        yield controller
    finally:
        controller.stop_timer()


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Translate prompter errors into exit codes."""
    try:
        yield
    except RequiredInputError as exc:
        click.echo(f"\n{exc}", err=True)
        sys.exit(EXIT_REQUIRED)
    except CancelledError as exc:
        click.echo(f"\n{exc}", err=True)
        sys.exit(EXIT_CANCELLED)
    except KeyboardInterrupt:
        click.echo("\nprompter: interrupted", err=True)
        sys.exit(EXIT_CANCELLED)
    except StreamError as exc:
        click.echo(f"\n{exc}", err=True)
        sys.exit(EXIT_STREAM)
