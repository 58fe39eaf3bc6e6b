"""Cancellation token for abandoning an in-flight prompt."""
from __future__ import annotations

import threading
from typing import Callable

CancelCallback = Callable[[str], None]


class CancelToken:
    """An observable flag indicating whether a prompt should be abandoned.

    Tokens are handed out by a :class:`CancelController`; only the controller
    can fire them. Callbacks registered with :meth:`add_callback` run once, on
    the thread that calls :meth:`CancelController.cancel`. A callback added
    after the token fired runs immediately on the registering thread.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._reason: str | None = None
        self._callbacks: list[CancelCallback] = []

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        """Return the cancellation reason, if any."""
        return self._reason

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the token fires or *timeout* elapses."""
        return self._event.wait(timeout)

    def add_callback(self, callback: CancelCallback) -> None:
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
            reason = self._reason or ""
        callback(reason)

    def remove_callback(self, callback: CancelCallback) -> None:
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

    def _cancel(self, reason: str) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(reason)

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self.cancelled}, reason={self._reason!r})"


class CancelController:
    """Controls a :class:`CancelToken` to cancel an in-flight prompt."""

    def __init__(self) -> None:
        self.token = CancelToken()
        self._timer: threading.Timer | None = None

    def cancel(self, reason: str = "cancelled by caller") -> None:
        """Fire the token. Subsequent calls are no-ops."""
        self.token._cancel(reason)

    def cancel_after(self, seconds: float, reason: str = "timed out") -> None:
        """Fire the token after *seconds* unless it has already fired."""
        self.stop_timer()
        timer = threading.Timer(seconds, self.cancel, args=(reason,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


def never_cancelled() -> CancelToken:
    """Return a token no controller will ever fire."""
    return CancelToken()
