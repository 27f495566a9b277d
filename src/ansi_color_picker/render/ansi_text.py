"""Measuring, stripping and fitting strings that contain SGR escapes."""

from __future__ import annotations

import re

# CSI sequences (SGR, erase-in-line, cursor moves)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def strip_ansi(s: str) -> str:
    """Remove escape sequences, leaving only what the terminal displays."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Number of columns ``s`` occupies on screen."""
    return len(strip_ansi(s))


def truncate(s: str, max_width: int, reset: bool = True) -> str:
    """
    Cut ``s`` down to ``max_width`` visible columns.

    Escape sequences are copied through untouched and never counted.

    Args:
        s: String to truncate
        max_width: Maximum visible width
        reset: Append an SGR reset when something was cut, so a dangling
            color does not bleed into the rest of the line
    """
    if max_width <= 0:
        return ""

    parts: list[str] = []
    width = 0
    pos = 0
    while pos < len(s) and width < max_width:
        match = _ANSI_ESCAPE.match(s, pos)
        if match:
            parts.append(match.group())
            pos = match.end()
            continue
        parts.append(s[pos])
        width += 1
        pos += 1

    # Keep trailing escapes (usually a reset) that follow the last column
    while pos < len(s):
        match = _ANSI_ESCAPE.match(s, pos)
        if not match:
            break
        parts.append(match.group())
        pos = match.end()

    output = ''.join(parts)
    if reset and pos < len(s):
        output += '\x1b[0m'
    return output


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad ``s`` on the right to ``width`` visible columns."""
    current = visible_len(s)
    if current >= width:
        return s
    return s + char * (width - current)
