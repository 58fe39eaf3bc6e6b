"""Error hierarchy for the prompter package."""
from __future__ import annotations


class PrompterError(Exception):
    """Base error for all prompter errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class RequiredInputError(PrompterError):
    """Input ran out before an answer was given to a required question."""

    def __init__(
        self,
        message: str = "prompter: input is required",
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)


class CancelledError(PrompterError):
    """The prompt was abandoned because its cancel token fired."""

    def __init__(self, message: str = "prompter: cancelled", *, reason: str | None = None) -> None:
        super().__init__(f"{message}: {reason}" if reason else message)
        self.reason = reason


class StreamError(PrompterError):
    """The underlying input or output stream failed."""
