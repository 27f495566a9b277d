"""Terminal infrastructure - raw mode, output, key decoding."""

from ansi_color_picker.cli.core.terminal import Terminal, TerminalSize
from ansi_color_picker.cli.core.input import InputReader, KeyEvent, Key, event_name

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "event_name",
]
