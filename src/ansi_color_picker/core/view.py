"""View projector - derives a renderable description from the state.

``project`` never mutates anything; the same state and registry always
yield an equal ``View``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ansi_color_picker.core.palette import PaletteRegistry
from ansi_color_picker.core.state import EditMode, Position, SelectionState, Style, StyleFlags

# Maximum number of swatches shown per category row
VIEWPORT_WIDTH = 24


class Marker(Enum):
    """What a swatch is marked with, in precedence order."""
    PRIMARY = "X"       # Position being edited right now
    FOREGROUND = "F"    # Committed foreground, shown while editing background
    BACKGROUND = "B"    # Committed background, shown while editing foreground
    NONE = " "

    @property
    def glyph(self) -> str:
        return self.value


@dataclass(frozen=True)
class Swatch:
    """One visible color cell of a category row."""
    index: int
    color: int
    marker: Marker = Marker.NONE


@dataclass(frozen=True)
class CategoryRow:
    """A category's windowed swatches plus its row decorations."""
    name: str
    swatches: tuple[Swatch, ...]
    is_current: bool
    ellipsis_left: bool
    ellipsis_right: bool


@dataclass(frozen=True)
class StyleIndicator:
    style: Style
    enabled: bool

    @property
    def hotkey(self) -> str:
        return self.style.hotkey


@dataclass(frozen=True)
class View:
    """Everything needed to draw one frame."""
    background: Position
    foreground: Position
    background_color: int
    foreground_color: int
    mode: EditMode
    styles: StyleFlags
    rows: tuple[CategoryRow, ...]
    indicators: tuple[StyleIndicator, ...]

    @property
    def mode_label(self) -> str:
        return f"Editing: {self.mode.label}"


def viewport(length: int, selected: int, width: int = VIEWPORT_WIDTH) -> tuple[int, int]:
    """
    Visible ``[start, end)`` range of a row of ``length`` swatches.

    Rows that fit are shown whole. Longer rows get a ``width``-wide window
    centered on ``selected`` and pushed back inside the row at either end.
    """
    if length <= width:
        return 0, length
    start = max(0, min(length - width, selected - width // 2))
    return start, start + width


def _marker_for(position: Position, state: SelectionState) -> Marker:
    if position == state.cursor:
        return Marker.PRIMARY
    if state.mode is EditMode.BACKGROUND and position == state.foreground:
        return Marker.FOREGROUND
    if state.mode is EditMode.FOREGROUND and position == state.background:
        return Marker.BACKGROUND
    return Marker.NONE


def _anchor_index(category: int, state: SelectionState) -> int:
    """Index a row's viewport is centered on."""
    if category == state.cursor.category:
        return state.cursor.index
    inactive = state.committed(state.mode.other)
    if category == inactive.category:
        return inactive.index
    return 0


def _project_row(category: int, state: SelectionState, registry: PaletteRegistry) -> CategoryRow:
    entry = registry.category(category)
    start, end = viewport(len(entry.colors), _anchor_index(category, state))
    swatches = tuple(
        Swatch(index, entry.colors[index], _marker_for(Position(category, index), state))
        for index in range(start, end)
    )
    return CategoryRow(
        name=entry.name,
        swatches=swatches,
        is_current=category == state.cursor.category,
        ellipsis_left=start > 0,
        ellipsis_right=end < len(entry.colors),
    )


def project(state: SelectionState, registry: PaletteRegistry) -> View:
    """Build the view for ``state``."""
    background = state.effective(EditMode.BACKGROUND)
    foreground = state.effective(EditMode.FOREGROUND)

    return View(
        background=background,
        foreground=foreground,
        background_color=registry.colors_of(background.category)[background.index],
        foreground_color=registry.colors_of(foreground.category)[foreground.index],
        mode=state.mode,
        styles=state.styles,
        rows=tuple(_project_row(i, state, registry) for i in range(len(registry))),
        indicators=tuple(StyleIndicator(style, state.styles.is_enabled(style)) for style in Style),
    )
