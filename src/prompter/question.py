"""Question: a configured prompt and the loop that resolves it to an answer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from prompter.cancel import CancelToken, never_cancelled
from prompter.errors import CancelledError, RequiredInputError, StreamError
from prompter.outcome import OutcomeKind
from prompter.validators import Validator, is_yes, run_validators, yes_or_no

if TYPE_CHECKING:
    from prompter.session import Prompter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    """A question that can be asked through a :class:`Prompter`.

    Questions are immutable: ``with_default``, ``with_optional`` and
    ``with_validators`` return a new Question and leave the receiver
    untouched, so a Question can be shared and refined freely.

    Resolution rules, applied on every attempt:

    - Empty input takes the default when one is set, is accepted as ``""``
      when the question is optional, and is asked again otherwise.
    - Non-empty input runs through the validators in order. The first
      rejection is written to the output and the question is asked again.
    - End of input takes the default, or ``""`` when optional, and raises
      :class:`RequiredInputError` otherwise.
    - A failed read raises :class:`StreamError` and a fired cancel token
      raises :class:`CancelledError`. Neither is retried.

    The default is returned as-is and never validated.
    """

    prompter: Prompter = field(repr=False)
    default: str = ""
    optional: bool = False
    validators: tuple[Validator, ...] = ()

    # --- builders -------------------------------------------------------------

    def with_default(self, default: str) -> Question:
        """Return a copy answering *default* when the input is empty."""
        return replace(self, default=default)

    def with_optional(self, optional: bool = True) -> Question:
        """Return a copy that accepts an empty answer."""
        return replace(self, optional=optional)

    def with_validators(self, *validators: Validator) -> Question:
        """Return a copy with *validators* appended to the existing ones."""
        return replace(self, validators=self.validators + tuple(validators))

    # --- asking ---------------------------------------------------------------

    def ask(self, prompt: str, cancel: CancelToken | None = None) -> str:
        """Ask the question and return the accepted answer."""
        return self._resolve(prompt, cancel, secret=False)

    def password(self, prompt: str, cancel: CancelToken | None = None) -> str:
        """Ask for a secret, with echo disabled when reading from a terminal."""
        return self._resolve(prompt, cancel, secret=True)

    def confirm(self, prompt: str, cancel: CancelToken | None = None) -> bool:
        """Ask a yes/no question and return True for yes."""
        answer = self.with_validators(yes_or_no).ask(prompt, cancel)
        return is_yes(answer)

    def _resolve(self, prompt: str, cancel: CancelToken | None, *, secret: bool) -> str:
        p = self.prompter
        token = cancel if cancel is not None else never_cancelled()
        read_op = p.secure_source.read_secret if secret else p.line_source.read_line

        attempt = 0
        while True:
            attempt += 1
            p.write(prompt + p.config.separator)
            try:
                outcome = p.read(read_op, token)
            except KeyboardInterrupt:
                if secret:
                    p.restore_echo()
                raise

            if outcome.kind is OutcomeKind.CANCELLED:
                logger.debug("prompt %r cancelled: %s", prompt, outcome.reason)
                if secret:
                    # The abandoned read still has echo off.
                    p.restore_echo()
                raise CancelledError(reason=outcome.reason)
            if outcome.kind is OutcomeKind.ERROR:
                raise StreamError(
                    f"prompter: read failed: {outcome.error}", cause=outcome.error
                ) from outcome.error

            if secret and p.config.password_newline:
                # Echo was off, so the terminal did not move to a new line.
                p.write("\n")

            if outcome.kind is OutcomeKind.END_OF_INPUT:
                if not (self.default or self.optional):
                    raise RequiredInputError()
                return self._empty_answer(prompt)

            value = outcome.value
            if value == "":
                if self.default or self.optional:
                    return self._empty_answer(prompt)
                logger.debug("empty answer to required prompt %r (attempt %d)", prompt, attempt)
                continue

            message = run_validators(self.validators, value)
            if message is not None:
                logger.debug("answer to %r rejected (attempt %d): %s", prompt, attempt, message)
                p.write(message + "\n")
                continue

            return value

    def _empty_answer(self, prompt: str) -> str:
        if self.default:
            logger.debug("using default for prompt %r", prompt)
            return self.default
        return ""
