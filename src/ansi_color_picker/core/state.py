"""Selection state and its transitions.

The state is a frozen value. Every transition takes a state and returns
a new one, so the session loop simply rebinds its reference per event.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from ansi_color_picker.core.palette import PaletteRegistry

# Step used by the shift-modified left/right keys
LARGE_STEP = 2


class EditMode(Enum):
    """Which channel the live cursor drives."""
    BACKGROUND = "background"
    FOREGROUND = "foreground"

    @property
    def other(self) -> EditMode:
        if self is EditMode.BACKGROUND:
            return EditMode.FOREGROUND
        return EditMode.BACKGROUND

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Style(Enum):
    """Text style attributes, in indicator display order."""
    ITALIC = "italic"
    BOLD = "bold"
    FAINT = "faint"
    BLINK = "blink"
    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"
    REVERSE = "reverse"

    @property
    def hotkey(self) -> str:
        """Key that toggles this style."""
        return _HOTKEYS[self]


_HOTKEYS = {
    Style.ITALIC: "i",
    Style.BOLD: "b",
    Style.FAINT: "f",
    Style.BLINK: "k",
    Style.STRIKETHROUGH: "s",
    Style.UNDERLINE: "u",
    Style.REVERSE: "r",
}


@dataclass(frozen=True)
class Position:
    """A (category, index) location in the palette."""
    category: int = 0
    index: int = 0


@dataclass(frozen=True)
class StyleFlags:
    """Independent on/off text attributes."""
    italic: bool = False
    bold: bool = False
    faint: bool = False
    blink: bool = False
    strikethrough: bool = False
    underline: bool = False
    reverse: bool = False

    def is_enabled(self, style: Style) -> bool:
        return getattr(self, style.value)

    def toggle(self, style: Style) -> StyleFlags:
        """Return a copy with exactly one flag flipped."""
        return replace(self, **{style.value: not self.is_enabled(style)})

    @property
    def enabled(self) -> tuple[Style, ...]:
        """Enabled styles in display order."""
        return tuple(style for style in Style if self.is_enabled(style))


@dataclass(frozen=True)
class SelectionState:
    """
    Everything the picker remembers between key events.

    Attributes:
        cursor: Live position, bound to whichever channel ``mode`` names
        foreground: Last committed foreground position
        background: Last committed background position
        mode: Channel currently being edited
        styles: Text style toggles for the preview
    """
    cursor: Position = field(default_factory=Position)
    foreground: Position = field(default_factory=Position)
    background: Position = field(default_factory=Position)
    mode: EditMode = EditMode.BACKGROUND
    styles: StyleFlags = field(default_factory=StyleFlags)

    @classmethod
    def initial(cls, category: int = 0) -> SelectionState:
        """Fresh state with cursor and both channels at ``(category, 0)``."""
        start = Position(category, 0)
        return cls(cursor=start, foreground=start, background=start)

    def committed(self, mode: EditMode) -> Position:
        """Stored selection for a channel."""
        if mode is EditMode.FOREGROUND:
            return self.foreground
        return self.background

    def effective(self, mode: EditMode) -> Position:
        """Position a channel currently shows: the cursor when active."""
        if mode is self.mode:
            return self.cursor
        return self.committed(mode)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def move_category(state: SelectionState, registry: PaletteRegistry, delta: int) -> SelectionState:
    """Move the cursor to another category, wrapping around the ends.

    The color index is clamped to the new category's length.
    """
    count = len(registry)
    category = (state.cursor.category + delta) % count
    last = len(registry.colors_of(category)) - 1
    index = _clamp(state.cursor.index, 0, last)
    return replace(state, cursor=Position(category, index))


def move_color(state: SelectionState, registry: PaletteRegistry, delta: int) -> SelectionState:
    """Move the cursor within its category, stopping at either end."""
    last = len(registry.colors_of(state.cursor.category)) - 1
    index = _clamp(state.cursor.index + delta, 0, last)
    if index == state.cursor.index:
        return state
    return replace(state, cursor=Position(state.cursor.category, index))


def toggle_mode(state: SelectionState) -> SelectionState:
    """Commit the cursor to the active channel and switch channels."""
    if state.mode is EditMode.FOREGROUND:
        committed = replace(state, foreground=state.cursor)
    else:
        committed = replace(state, background=state.cursor)

    mode = state.mode.other
    return replace(committed, mode=mode, cursor=committed.committed(mode))


def toggle_style(state: SelectionState, style: Style) -> SelectionState:
    return replace(state, styles=state.styles.toggle(style))
