"""prompter: ask questions on the command line, with defaults, validation and cancellation."""

from prompter.cancel import CancelController, CancelToken
from prompter.config import PrompterConfig
from prompter.errors import CancelledError, PrompterError, RequiredInputError, StreamError
from prompter.outcome import OutcomeKind, ReadOutcome
from prompter.question import Question
from prompter.session import Prompter

__version__ = "0.1.0"

__all__ = [
    "Prompter",
    "Question",
    "PrompterConfig",
    "CancelController",
    "CancelToken",
    "PrompterError",
    "RequiredInputError",
    "CancelledError",
    "StreamError",
    "OutcomeKind",
    "ReadOutcome",
]
