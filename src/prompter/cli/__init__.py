"""Command-line front end for prompter."""

from prompter.cli.main import cli

__all__ = ["cli"]
