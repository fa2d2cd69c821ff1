from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from collections.abc import Iterator
from types import TracebackType
from typing import TextIO

import structlog

from typedrill.core.models.keys import KeyEvent

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

ESCAPE = "\x1b"
ABORT_CHARS = frozenset({"\x03", "\x04"})  # Ctrl-C, Ctrl-D
NEWLINE_CHARS = frozenset({"\r", "\n"})
ESCAPE_TIMEOUT = 0.05  # seconds to wait for the rest of an escape sequence


def _escape_sequence_end(chunk: str, start: int) -> int | None:
    """Index just past the escape sequence at ``chunk[start]``, or None if unfinished."""
    index = start + 1
    if index >= len(chunk):
        return None
    if chunk[index] not in "[O":
        # Alt+key arrives as ESC followed by the key.
        return index + 1
    index += 1
    while index < len(chunk):
        if "\x40" <= chunk[index] <= "\x7e":
            return index + 1
        index += 1
    return None


def split_keys(chunk: str) -> tuple[list[KeyEvent], str]:
    """Split terminal input into key events plus an unfinished escape prefix.

    The returned prefix (``"\\x1b"``, ``"\\x1b["`` and so on) has to be prepended
    to the next read, or passed to ``flush_pending`` when no more input comes.
    """
    events: list[KeyEvent] = []
    index = 0
    while index < len(chunk):
        char = chunk[index]
        if char == ESCAPE:
            end = _escape_sequence_end(chunk, index)
            if end is None:
                return events, chunk[index:]
            events.append(KeyEvent.ignored(chunk[index:end]))
            index = end
            continue
        if char in ABORT_CHARS:
            events.append(KeyEvent.abort())
        elif char in NEWLINE_CHARS:
            events.append(KeyEvent.typed("\n"))
        elif char == "\t" or char.isprintable():
            events.append(KeyEvent.typed(char))
        else:
            events.append(KeyEvent.ignored(char))
        index += 1
    return events, ""


def flush_pending(pending: str) -> list[KeyEvent]:
    """Resolve a prefix that was not followed by more input: a lone Escape aborts."""
    if not pending:
        return []
    if pending == ESCAPE:
        return [KeyEvent.abort()]
    return [KeyEvent.ignored(pending)]


def decode_keys(chunk: str) -> list[KeyEvent]:
    """Split one complete burst of input into key events.

    A lone Escape aborts; escape sequences (arrows, function keys) are ignored.
    Enter is reported as a newline so it can match line breaks in the text.
    """
    events, pending = split_keys(chunk)
    return events + flush_pending(pending)


class TerminalKeySource:
    """Key presses from a terminal in cbreak mode (no echo, no line buffering).

    Use as a context manager so the previous terminal mode is restored on every
    exit path. Non-tty streams are read as-is, which keeps piped input usable.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        read_size: int = 64,
        escape_timeout: float = ESCAPE_TIMEOUT,
    ) -> None:
        self._stream = stream or sys.stdin
        self._read_size = read_size
        self._escape_timeout = escape_timeout
        self._saved_attrs: list | None = None

    @property
    def fd(self) -> int:
        return self._stream.fileno()

    def __enter__(self) -> TerminalKeySource:
        if os.isatty(self.fd):
            self._saved_attrs = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
            log.debug("terminal_cbreak_enabled", fd=self.fd)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._saved_attrs is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
            log.debug("terminal_mode_restored", fd=self.fd)

    def _input_ready(self) -> bool:
        ready, _, _ = select.select([self.fd], [], [], self._escape_timeout)
        return bool(ready)

    def __iter__(self) -> Iterator[KeyEvent]:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        pending = ""
        while True:
            # An escape prefix with nothing following it was a real Escape press.
            if pending and not self._input_ready():
                yield from flush_pending(pending)
                pending = ""
            data = os.read(self.fd, self._read_size)
            if not data:
                yield from flush_pending(pending)
                return
            events, pending = split_keys(pending + decoder.decode(data))
            yield from events
