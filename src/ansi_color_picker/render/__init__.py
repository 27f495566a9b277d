"""Terminal rendering of picker views."""

from ansi_color_picker.render.terminal import FrameRenderer, join_horizontal, span, swatch
from ansi_color_picker.render.sgr import TextStyle, styled

__all__ = ["FrameRenderer", "TextStyle", "join_horizontal", "span", "styled", "swatch"]
