"""Prompter configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class PrompterConfig:
    """Settings shared by every question asked through one Prompter."""

    separator: str = " "  # written between the prompt text and the input
    password_newline: bool = True
    read_thread_name: str = "prompter-read"
    encoding: str = "utf-8"  # used when the input yields bytes

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PrompterConfig:
        """Build a config from ``PROMPTER_*`` environment variables."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if "PROMPTER_SEPARATOR" in env:
            kwargs["separator"] = env["PROMPTER_SEPARATOR"]
        if "PROMPTER_PASSWORD_NEWLINE" in env:
            kwargs["password_newline"] = (
                env["PROMPTER_PASSWORD_NEWLINE"].strip().lower() in _TRUTHY
            )
        if "PROMPTER_ENCODING" in env:
            kwargs["encoding"] = env["PROMPTER_ENCODING"]
        return cls(**kwargs)  # type: ignore[arg-type]
