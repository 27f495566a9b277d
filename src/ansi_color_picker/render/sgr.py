"""SGR (Select Graphic Rendition) helpers for 256-color text styling."""

from __future__ import annotations

from dataclasses import dataclass, field

from ansi_color_picker.core.state import Style

RESET = "\x1b[0m"

# SGR parameter for each text attribute
STYLE_CODES: dict[Style, str] = {
    Style.BOLD: "1",
    Style.FAINT: "2",
    Style.ITALIC: "3",
    Style.UNDERLINE: "4",
    Style.BLINK: "5",
    Style.REVERSE: "7",
    Style.STRIKETHROUGH: "9",
}


def fg_code(index: int) -> str:
    """SGR parameters for a 256-color foreground."""
    if not 0 <= index <= 255:
        raise ValueError(f"256-color index must be 0-255, got {index}")
    return f"38;5;{index}"


def bg_code(index: int) -> str:
    """SGR parameters for a 256-color background."""
    if not 0 <= index <= 255:
        raise ValueError(f"256-color index must be 0-255, got {index}")
    return f"48;5;{index}"


@dataclass(frozen=True)
class TextStyle:
    """
    A set of text attributes to apply to a span.

    Colors are 256-color indexes; None leaves the terminal default.
    """
    fg: int | None = None
    bg: int | None = None
    attrs: frozenset[Style] = field(default_factory=frozenset)

    def with_attrs(self, *styles: Style) -> TextStyle:
        return TextStyle(self.fg, self.bg, self.attrs | frozenset(styles))

    def sgr(self) -> str:
        """Escape sequence that switches to this style ('' for plain)."""
        params = [STYLE_CODES[s] for s in Style if s in self.attrs]
        if self.fg is not None:
            params.append(fg_code(self.fg))
        if self.bg is not None:
            params.append(bg_code(self.bg))
        if not params:
            return ""
        return f"\x1b[{';'.join(params)}m"


def styled(text: str, style: TextStyle) -> str:
    """Wrap ``text`` in ``style``, resetting afterwards."""
    prefix = style.sgr()
    if not prefix or not text:
        return text
    return f"{prefix}{text}{RESET}"
