"""Low-level terminal operations for the interactive picker."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal output and mode switching."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def home(self) -> None:
        """Move cursor to the top-left corner."""
        self.write('\x1b[H')

    def clear_below(self) -> None:
        """Erase from the cursor to the end of the screen."""
        self.write('\x1b[J')

    def reset(self) -> None:
        self.write('\x1b[0m')

    def hide_cursor(self) -> None:
        self.write('\x1b[?25l')

    def show_cursor(self) -> None:
        self.write('\x1b[?25h')

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Context manager for raw keyboard input (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows: no termios, input stays cooked
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @contextmanager
    def alternate_screen(self) -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        self.write('\x1b[?1049h')
        try:
            yield
        finally:
            self.write('\x1b[?1049l')

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input."""
        with self.alternate_screen():
            self.hide_cursor()
            try:
                with self.raw_mode():
                    yield
            finally:
                self.show_cursor()
                self.reset()
