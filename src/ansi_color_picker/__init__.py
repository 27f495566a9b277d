"""
ansi-color-picker: interactive terminal picker for 256-color pairs

Pick a background and a foreground color from curated palettes, with a
live preview and text-style toggles.

Quick Start:
    $ ansi-color-picker pick
    $ ansi-color-picker palettes

Library use:
    >>> from ansi_color_picker import PaletteRegistry, SelectionState, interpret, project
    >>> registry = PaletteRegistry.default()
    >>> state = interpret(SelectionState.initial(), "down", registry).state
    >>> project(state, registry).background_color
"""

__version__ = "0.1.0"

from ansi_color_picker.core.palette import PaletteError, PaletteRegistry
from ansi_color_picker.core.state import EditMode, SelectionState, Style
from ansi_color_picker.core.interpreter import interpret
from ansi_color_picker.core.view import View, project

__all__ = [
    "__version__",
    "PaletteError",
    "PaletteRegistry",
    "EditMode",
    "SelectionState",
    "Style",
    "interpret",
    "View",
    "project",
]
