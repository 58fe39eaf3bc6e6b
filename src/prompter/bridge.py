"""Cancellation bridge: race a blocking read against a cancel token."""
from __future__ import annotations

import logging
import queue
import threading
from typing import Callable

from prompter.cancel import CancelToken
from prompter.outcome import OutcomeKind, ReadOutcome

logger = logging.getLogger(__name__)

ReadOperation = Callable[[], ReadOutcome]


def read_with_cancellation(
    read_op: ReadOperation,
    cancel: CancelToken,
    *,
    thread_name: str = "prompter-read",
) -> ReadOutcome:
    """Run *read_op* on a background thread and return the first of its
    outcome or a cancellation.

    A token that has already fired returns a cancelled outcome without
    starting a read. When the token fires mid-read this returns at once.
    The reader thread is left behind because a blocking read on an
    arbitrary stream cannot be interrupted; it is a daemon thread, its
    eventual result is dropped, and it goes away when the stream is closed
    or the process exits.
    """
    if cancel.cancelled:
        return ReadOutcome.cancelled(cancel.reason)

    results: queue.Queue[ReadOutcome] = queue.Queue()

    def _read() -> None:
        try:
            outcome = read_op()
        except Exception as exc:
            outcome = ReadOutcome.failure(exc)
        results.put(outcome)

    def _on_cancel(reason: str) -> None:
        results.put(ReadOutcome.cancelled(reason))

    worker = threading.Thread(target=_read, name=thread_name, daemon=True)
    cancel.add_callback(_on_cancel)
    try:
        if not cancel.cancelled:
            worker.start()
        outcome = results.get()
    finally:
        cancel.remove_callback(_on_cancel)

    if outcome.kind is OutcomeKind.CANCELLED and worker.is_alive():
        logger.debug("abandoning in-flight read on thread %s", worker.name)
    return outcome
