"""Selection model: palette registry, state transitions, view projection."""

from ansi_color_picker.core.palette import Category, PaletteError, PaletteRegistry, DEFAULT_PALETTE
from ansi_color_picker.core.state import EditMode, Position, SelectionState, Style, StyleFlags
from ansi_color_picker.core.interpreter import Binding, Outcome, BINDINGS, interpret
from ansi_color_picker.core.view import View, CategoryRow, Swatch, Marker, StyleIndicator, project

__all__ = [
    "Category",
    "PaletteError",
    "PaletteRegistry",
    "DEFAULT_PALETTE",
    "EditMode",
    "Position",
    "SelectionState",
    "Style",
    "StyleFlags",
    "Binding",
    "Outcome",
    "BINDINGS",
    "interpret",
    "View",
    "CategoryRow",
    "Swatch",
    "Marker",
    "StyleIndicator",
    "project",
]
