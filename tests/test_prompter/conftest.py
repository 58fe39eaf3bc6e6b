"""Shared fixtures for prompter tests."""

from __future__ import annotations

import io
import threading

import pytest


class BlockingStream:
    """A text stream whose reads block until lines are fed or it is closed."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._lines: list[str] = []
        self._closed = False
        self.reads_started = threading.Event()
        self.read_calls = 0

    def feed(self, line: str) -> None:
        with self._cond:
            self._lines.append(line)
            self._cond.notify_all()

    def readline(self) -> str:
        with self._cond:
            self.read_calls += 1
            self.reads_started.set()
            self._cond.wait_for(lambda: self._lines or self._closed, timeout=5.0)
            if self._lines:
                return self._lines.pop(0)
            if self._closed:
                raise ValueError("I/O operation on closed file.")
            return ""

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def blocking_stream():
    stream = BlockingStream()
    yield stream
    stream.close()
