"""Keyboard input decoding for the picker."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    TAB = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    CTRL_C = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence


# Named keys understood by the picker's interpreter
_KEY_NAMES: dict[Key, str] = {
    Key.UP: "up",
    Key.DOWN: "down",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.SHIFT_LEFT: "shift-left",
    Key.SHIFT_RIGHT: "shift-right",
    Key.TAB: "tab",
    Key.CTRL_C: "quit",
    Key.ESCAPE: "quit",
}


def event_name(event: KeyEvent) -> Optional[str]:
    """
    Name of a key event as the interpreter knows it.

    Printable characters map to themselves (lower-cased), except ``q``
    which means quit. Returns None for keys with no name.
    """
    if event.key is not None:
        return _KEY_NAMES.get(event.key)
    if event.char:
        ch = event.char.lower()
        return "quit" if ch == "q" else ch
    return None


class InputReader:
    """
    Keyboard input reader working on a raw file descriptor.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Shift+arrow (xterm modifier 2)
        '[1;2C': Key.SHIFT_RIGHT,
        '[1;2D': Key.SHIFT_LEFT,
        # Shift+arrow (rxvt)
        '[c': Key.SHIFT_RIGHT,
        '[d': Key.SHIFT_LEFT,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
        '\x03': Key.CTRL_C,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def feed(self, data: str) -> None:
        """Append already-read input to the buffer."""
        self._buffer += data

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input available within timeout.
        """
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_blocking(self) -> KeyEvent:
        """Read a key event, blocking until input is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            data = os.read(self._fd, 1024)
            self._buffer += data.decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            pass

        # A lone escape may be the start of a split sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait up to 100ms for the rest of an escape sequence."""
        deadline = time.monotonic() + 0.1

        while time.monotonic() < deadline:
            wait_time = min(deadline - time.monotonic(), 0.025)
            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    data = os.read(self._fd, 1024)
                    self._buffer += data.decode('utf-8', errors='replace')
                except (OSError, BlockingIOError):
                    pass

                rest = self._buffer[1:]
                if rest and (rest[-1].isalpha() or rest[-1] == '~' or rest in self.SEQUENCES):
                    return

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        if not self._buffer:
            return None

        first = self._buffer[0]

        if first in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[first], raw=first)

        if first == '\x1b':
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]
        if first.isprintable():
            return KeyEvent(char=first, raw=first)

        # Unknown control character
        return KeyEvent(raw=first)

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]
        if not rest or rest[0] == '\x1b':
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        # Sequence runs up to and including a letter or ~
        end_idx = len(rest)
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                end_idx = i
                break
            if i > 0 and (ch.isalpha() or ch == '~'):
                end_idx = i + 1
                break

        seq = rest[:end_idx]
        self._buffer = rest[end_idx:]
        return KeyEvent(key=self.SEQUENCES.get(seq), raw='\x1b' + seq)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
