"""Line sources: read one line, or one echo-suppressed secret, from a stream."""
from __future__ import annotations

import logging
import os
import threading
from typing import IO, Any

from prompter.outcome import ReadOutcome

logger = logging.getLogger(__name__)


def terminal_fd(stream: Any) -> int | None:
    """Return the file descriptor behind *stream*, or None if it has none."""
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        # io.UnsupportedOperation (StringIO, BytesIO) is both OSError and ValueError.
        return None


class LineSource:
    """Reads newline-terminated lines from a text or byte stream.

    Each call to :meth:`read_line` consumes at most one line. A trailing
    ``\\r\\n`` or ``\\n`` is stripped. A final line without a terminator is
    still returned as a value; the read after it reports end of input.
    Reading from a closed stream also reports end of input so that a read
    abandoned by a cancelled prompt resolves once the stream is closed.
    """

    def __init__(self, stream: IO[Any], encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding

    @property
    def stream(self) -> IO[Any]:
        return self._stream

    def read_line(self) -> ReadOutcome:
        try:
            raw = self._stream.readline()
            if isinstance(raw, bytes):
                raw = raw.decode(self._encoding)
        except UnicodeDecodeError as exc:
            return ReadOutcome.failure(exc)
        except ValueError:
            logger.debug("read from closed stream, treating as end of input")
            return ReadOutcome.end_of_input()
        except OSError as exc:
            return ReadOutcome.failure(exc)

        if raw == "":
            return ReadOutcome.end_of_input()
        return ReadOutcome.of(raw.rstrip("\r\n"))

    def close(self) -> None:
        self._stream.close()


class SecureLineSource:
    """Reads a secret with terminal echo disabled.

    Echo is only suppressed when the input is bound to an interactive
    terminal (POSIX only, via termios). Piped or in-memory input is read
    exactly as :class:`LineSource` would read it, which lets tests supply
    passwords as plain text.

    The terminal attributes saved before a read are kept until echo is
    restored, either by the read returning or by :meth:`restore_echo`
    when the read is abandoned.
    """

    def __init__(self, lines: LineSource, fd: int | None = None) -> None:
        self._lines = lines
        self._fd = fd
        self._lock = threading.Lock()
        self._saved: list[Any] | None = None

    def is_terminal(self) -> bool:
        if self._fd is None:
            return False
        try:
            return os.isatty(self._fd)
        except OSError:
            return False

    def read_secret(self) -> ReadOutcome:
        if not self.is_terminal():
            return self._lines.read_line()
        return self._read_without_echo(self._fd)  # type: ignore[arg-type]

    def restore_echo(self) -> None:
        """Put back the terminal attributes saved by an unfinished read.

        Raises ``OSError`` if the terminal rejects them.
        Does nothing when no read has echo disabled.
        """
        with self._lock:
            saved, self._saved = self._saved, None
        if saved is None:
            return
        import termios

        try:
            termios.tcsetattr(self._fd, termios.TCSANOW, saved)
        except termios.error as exc:
            raise OSError(*exc.args) from exc
        logger.debug("restored terminal echo on fd %s", self._fd)

    def _read_without_echo(self, fd: int) -> ReadOutcome:
        try:
            import termios
        except ImportError as exc:
            return ReadOutcome.failure(exc)

        try:
            saved = termios.tcgetattr(fd)
            quiet = termios.tcgetattr(fd)
            quiet[3] &= ~termios.ECHO
            with self._lock:
                self._saved = saved
            termios.tcsetattr(fd, termios.TCSANOW, quiet)
        except (termios.error, OSError) as exc:
            with self._lock:
                self._saved = None
            return ReadOutcome.failure(exc)

        outcome = self._lines.read_line()
        try:
            self.restore_echo()
        except OSError as exc:
            logger.warning("could not restore terminal echo: %s", exc)
            if not outcome.failed:
                return ReadOutcome.failure(exc)
        return outcome
