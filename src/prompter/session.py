"""Prompter: the shared input/output context that questions are asked through."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

from prompter.bridge import ReadOperation, read_with_cancellation
from prompter.cancel import CancelToken
from prompter.config import PrompterConfig
from prompter.errors import StreamError
from prompter.outcome import ReadOutcome
from prompter.question import Question
from prompter.reader import LineSource, SecureLineSource, terminal_fd
from prompter.validators import Validator

logger = logging.getLogger(__name__)


class Prompter:
    """Asks questions on *output* and reads the answers from *input*.

    The Prompter owns the input stream: every question asked through it
    reads from the same cursor. It does no locking, so callers must not
    ask two questions on one Prompter at the same time.

    Usage::

        prompt = Prompter.default()
        name = prompt.ask("What is your name?")
        age = prompt.with_default("21").ask("What is your age?")
        if prompt.confirm("Continue?"):
            ...
    """

    def __init__(
        self,
        output: IO[str],
        input: IO[Any],
        config: PrompterConfig | None = None,
    ) -> None:
        self.config = config or PrompterConfig()
        self._output = output
        self._lines = LineSource(input, encoding=self.config.encoding)
        self._secure = SecureLineSource(self._lines, terminal_fd(input))

    @classmethod
    def default(cls, config: PrompterConfig | None = None) -> Prompter:
        """Create a Prompter bound to stdout and stdin."""
        return cls(sys.stdout, sys.stdin, config)

    # --- question factory -----------------------------------------------------

    def question(self) -> Question:
        """Return an unconfigured question bound to this Prompter."""
        return Question(prompter=self)

    def with_default(self, default: str) -> Question:
        return self.question().with_default(default)

    def with_optional(self, optional: bool = True) -> Question:
        return self.question().with_optional(optional)

    def with_validators(self, *validators: Validator) -> Question:
        return self.question().with_validators(*validators)

    def ask(self, prompt: str, cancel: CancelToken | None = None) -> str:
        return self.question().ask(prompt, cancel)

    def password(self, prompt: str, cancel: CancelToken | None = None) -> str:
        return self.question().password(prompt, cancel)

    def confirm(self, prompt: str, cancel: CancelToken | None = None) -> bool:
        return self.question().confirm(prompt, cancel)

    # --- I/O used by questions ------------------------------------------------

    @property
    def line_source(self) -> LineSource:
        return self._lines

    @property
    def secure_source(self) -> SecureLineSource:
        return self._secure

    def write(self, text: str) -> None:
        """Write *text* to the output and flush it."""
        try:
            self._output.write(text)
            self._output.flush()
        except (OSError, ValueError) as exc:
            raise StreamError(f"prompter: write failed: {exc}", cause=exc) from exc

    def read(self, read_op: ReadOperation, cancel: CancelToken) -> ReadOutcome:
        """Run one read, returning early if *cancel* fires."""
        return read_with_cancellation(
            read_op, cancel, thread_name=self.config.read_thread_name
        )

    def restore_echo(self) -> None:
        """Turn terminal echo back on after an abandoned password read."""
        try:
            self._secure.restore_echo()
        except OSError as exc:
            logger.warning("could not restore terminal echo: %s", exc)

    def close(self) -> None:
        """Close the input stream.

        Reads that are still pending, including reads abandoned by a
        cancelled prompt, resolve once the stream reports end of input.
        Later questions see end of input immediately.
        """
        logger.debug("closing prompter input")
        self._lines.close()
