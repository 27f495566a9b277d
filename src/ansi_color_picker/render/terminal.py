"""Render a picker View to terminal lines with SGR escapes."""

from __future__ import annotations

from ansi_color_picker.core.interpreter import command_hints
from ansi_color_picker.core.state import Style
from ansi_color_picker.core.view import CategoryRow, StyleIndicator, View
from ansi_color_picker.render.ansi_text import pad_to_width, visible_len
from ansi_color_picker.render.sgr import TextStyle, styled

SAMPLE_TEXT = " Selected Color Example "
SAMPLE_PADDING = (1, 4)  # (vertical, horizontal)

POINTER = "→ "
ELLIPSIS = "…"

# Glyph color for swatch markers
MARKER_FG = 15
# Accent for hotkey letters and command keys
ACCENT_FG = 33

# First indicator row holds this many styles; the rest go on the second
INDICATORS_FIRST_ROW = 4


def span(text: str, *attrs: Style, fg: int | None = None, bg: int | None = None) -> str:
    """Text with the given attributes and colors."""
    return styled(text, TextStyle(fg, bg, frozenset(attrs)))


def swatch(bg: int, glyph: str = " ", fg: int | None = None) -> str:
    """A single-cell swatch of color ``bg``, optionally showing ``glyph``."""
    if glyph.strip():
        return span(glyph, Style.BOLD, fg=MARKER_FG if fg is None else fg, bg=bg)
    return span(glyph, bg=bg)


def join_horizontal(left: list[str], right: list[str], gap: str = "") -> list[str]:
    """Place two blocks side by side, aligned at the top."""
    height = max(len(left), len(right))
    width = max((visible_len(line) for line in left), default=0)
    lines: list[str] = []
    for y in range(height):
        l = left[y] if y < len(left) else ""
        r = right[y] if y < len(right) else ""
        lines.append(f"{pad_to_width(l, width)}{gap}{r}")
    return lines


def indicator_parts(style: Style) -> tuple[str, str, str]:
    """Split a style name around its hotkey: ("", "I", "talic")."""
    name = style.value
    pos = name.index(style.hotkey)
    if pos == 0:
        return "", style.hotkey.upper(), name[1:]
    return name[:pos], name[pos], name[pos + 1:]


class FrameRenderer:
    """
    Turn a View into a full frame of terminal lines.

    The frame is, top to bottom: the preview sample with its value line
    and style indicators, the mode label, the category menu and the
    command hint.
    """

    def render(self, view: View) -> list[str]:
        lines = self.render_preview(view)
        lines.append(view.mode_label)
        lines.append("")
        lines.extend(self.render_menu(view.rows))
        lines.append("")
        lines.append("")
        lines.append(self.render_hint())
        return lines

    def render_text(self, view: View) -> str:
        return "\n".join(self.render(view))

    def render_preview(self, view: View) -> list[str]:
        """Sample block in the chosen colors beside the value/indicator lines."""
        pad_y, pad_x = SAMPLE_PADDING
        fill = TextStyle(fg=view.foreground_color, bg=view.background_color)
        text_style = fill.with_attrs(*view.styles.enabled)

        width = len(SAMPLE_TEXT) + 2 * pad_x
        blank = styled(" " * width, fill)
        side = styled(" " * pad_x, fill)
        sample = [blank] * pad_y + [side + styled(SAMPLE_TEXT, text_style) + side] + [blank] * pad_y

        first = view.indicators[:INDICATORS_FIRST_ROW]
        second = view.indicators[INDICATORS_FIRST_ROW:]
        info = [
            f" BG: {view.background_color} | FG: {view.foreground_color}",
            "".join(self.render_indicator(i) for i in first),
            "".join(self.render_indicator(i) for i in second),
        ]
        return join_horizontal(sample, info)

    def render_indicator(self, indicator: StyleIndicator) -> str:
        """Bracketed style name with its hotkey letter highlighted, faint when off."""
        before, letter, after = indicator_parts(indicator.style)
        if indicator.enabled:
            return (
                span(f" [{before}", Style.BOLD)
                + span(letter, Style.BOLD, fg=ACCENT_FG)
                + span(f"{after}]", Style.BOLD)
            )
        return (
            span(f" [{before}", Style.FAINT)
            + span(letter, fg=ACCENT_FG)
            + span(f"{after}]", Style.FAINT)
        )

    def render_menu(self, rows: tuple[CategoryRow, ...]) -> list[str]:
        name_width = max((len(row.name) for row in rows), default=0) + 1
        return [self.render_row(row, name_width) for row in rows]

    def render_row(self, row: CategoryRow, name_width: int) -> str:
        pointer = POINTER if row.is_current else " " * len(POINTER)
        name = span(row.name, Style.BOLD) + " " * (name_width - len(row.name))

        cells = [swatch(s.color, s.marker.glyph) for s in row.swatches]
        if row.ellipsis_left:
            cells.insert(0, ELLIPSIS)
        if row.ellipsis_right:
            cells.append(ELLIPSIS)
        return pointer + name + "".join(cells)

    def render_hint(self) -> str:
        parts = [
            f"{span(keys, Style.BOLD, fg=ACCENT_FG)} {action}"
            for keys, action in command_hints()
        ]
        return "Commands: " + ", ".join(parts)

