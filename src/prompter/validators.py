"""Built-in validators.

A validator takes the candidate answer and returns ``None`` to accept it, or
an error message (a string or an exception) to reject it. Validators may
also reject by raising :class:`ValueError`.
"""
from __future__ import annotations

import re
from typing import Callable

Validator = Callable[[str], str | Exception | None]

YES_TOKENS = ("y", "yes")
NO_TOKENS = ("n", "no")


def yes_or_no(value: str) -> str | None:
    """Accept only y/yes/n/no, ignoring case."""
    if value.lower() in YES_TOKENS + NO_TOKENS:
        return None
    return f"invalid value {value!r}, must enter yes or no"


def is_yes(value: str) -> bool:
    return value.lower() in ("y", "yes", "true")


def min_length(n: int) -> Validator:
    def validate(value: str) -> str | None:
        if len(value) < n:
            return f"{value!r} is too short, must be at least {n} characters"
        return None

    return validate


def max_length(n: int) -> Validator:
    def validate(value: str) -> str | None:
        if len(value) > n:
            return f"{value!r} is too long, must be at most {n} characters"
        return None

    return validate


def one_of(*choices: str, case_sensitive: bool = False) -> Validator:
    """Accept only one of *choices*."""
    allowed = set(choices) if case_sensitive else {c.lower() for c in choices}

    def validate(value: str) -> str | None:
        candidate = value if case_sensitive else value.lower()
        if candidate in allowed:
            return None
        return f"invalid value {value!r}, must be one of: {', '.join(choices)}"

    return validate


def matches(pattern: str | re.Pattern[str], message: str | None = None) -> Validator:
    """Accept values that fully match *pattern*."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(value: str) -> str | None:
        if compiled.fullmatch(value):
            return None
        if message:
            return message
        return f"invalid value {value!r}, must match {compiled.pattern}"

    return validate


def is_integer(value: str) -> str | None:
    try:
        int(value)
    except ValueError:
        return f"invalid value {value!r}, must be a whole number"
    return None


def run_validators(validators: tuple[Validator, ...] | list[Validator], value: str) -> str | None:
    """Run *validators* in order and return the first rejection message.

    Raises TypeError if a validator returns anything other than None, a
    message or an exception.
    """
    for validate in validators:
        try:
            result = validate(value)
        except ValueError as exc:
            return str(exc)
        if result is None:
            continue
        if isinstance(result, (str, Exception)):
            return str(result)
        name = getattr(validate, "__qualname__", repr(validate))
        raise TypeError(
            f"validator {name} returned {type(result).__name__}, "
            "expected None, a message or an exception"
        )
    return None
