"""Tests for SGR styling and frame rendering."""

import pytest

from ansi_color_picker.core.interpreter import command_hints
from ansi_color_picker.core.palette import PaletteRegistry
from ansi_color_picker.core.state import EditMode, Position, SelectionState, Style, StyleFlags
from ansi_color_picker.core.view import project
from ansi_color_picker.render.ansi_text import pad_to_width, strip_ansi, truncate, visible_len
from ansi_color_picker.render.sgr import TextStyle, bg_code, fg_code, styled
from ansi_color_picker.render.terminal import (
    SAMPLE_TEXT,
    FrameRenderer,
    indicator_parts,
    join_horizontal,
    swatch,
)


class TestSgr:
    """Tests for SGR code generation."""

    def test_color_codes(self) -> None:
        assert fg_code(196) == "38;5;196"
        assert bg_code(0) == "48;5;0"

    def test_color_range(self) -> None:
        with pytest.raises(ValueError):
            fg_code(256)
        with pytest.raises(ValueError):
            bg_code(-1)

    def test_plain_style(self) -> None:
        assert TextStyle().sgr() == ""
        assert styled("text", TextStyle()) == "text"

    def test_attribute_codes(self) -> None:
        style = TextStyle(attrs=frozenset(Style))
        assert style.sgr() == "\x1b[3;1;2;5;9;4;7m"

    def test_styled(self) -> None:
        style = TextStyle(fg=15, bg=196).with_attrs(Style.BOLD)
        assert styled("X", style) == "\x1b[1;38;5;15;48;5;196mX\x1b[0m"


class TestAnsiText:
    """Tests for escape-aware string helpers."""

    def test_visible_len(self) -> None:
        assert visible_len("\x1b[1;38;5;33mHi\x1b[0m") == 2

    def test_strip(self) -> None:
        assert strip_ansi("\x1b[48;5;3m \x1b[0m\x1b[K") == " "

    def test_truncate_adds_reset(self) -> None:
        assert truncate("\x1b[31mHello\x1b[0m", 3) == "\x1b[31mHel\x1b[0m"

    def test_truncate_keeps_short_strings(self) -> None:
        s = "\x1b[31mHi\x1b[0m"
        assert truncate(s, 5) == s

    def test_truncate_zero(self) -> None:
        assert truncate("abc", 0) == ""

    def test_pad(self) -> None:
        assert pad_to_width("\x1b[1mab\x1b[0m", 4) == "\x1b[1mab\x1b[0m  "
        assert pad_to_width("abcdef", 4) == "abcdef"


class TestPrimitives:
    """Tests for swatches, indicator labels and horizontal joins."""

    def test_swatch_with_glyph(self) -> None:
        assert swatch(196, "X") == "\x1b[1;38;5;15;48;5;196mX\x1b[0m"

    def test_plain_swatch(self) -> None:
        assert swatch(21) == "\x1b[48;5;21m \x1b[0m"

    @pytest.mark.parametrize("style,parts", [
        (Style.ITALIC, ("", "I", "talic")),
        (Style.BOLD, ("", "B", "old")),
        (Style.BLINK, ("blin", "k", "")),
        (Style.STRIKETHROUGH, ("", "S", "trikethrough")),
        (Style.REVERSE, ("", "R", "everse")),
    ])
    def test_indicator_parts(self, style: Style, parts: tuple[str, str, str]) -> None:
        assert indicator_parts(style) == parts

    def test_join_horizontal(self) -> None:
        left = ["\x1b[1mab\x1b[0m", "abcd"]
        right = ["x", "y", "z"]
        lines = join_horizontal(left, right)
        assert [strip_ansi(line) for line in lines] == ["ab  x", "abcdy", "    z"]


class TestFrameRenderer:
    """Tests for full frames, compared without escape codes."""

    @pytest.fixture
    def renderer(self) -> FrameRenderer:
        return FrameRenderer()

    def plain(self, renderer: FrameRenderer, state: SelectionState, registry: PaletteRegistry) -> list[str]:
        return [strip_ansi(line) for line in renderer.render(project(state, registry))]

    def test_frame_layout(self, renderer: FrameRenderer, fresh: SelectionState, small_registry: PaletteRegistry) -> None:
        lines = self.plain(renderer, fresh, small_registry)
        blank = " " * 32
        assert lines == [
            blank + " BG: 0 | FG: 0",
            "    " + SAMPLE_TEXT + "    " + " [Italic] [Bold] [Faint] [blink]",
            blank + " [Strikethrough] [Underline] [Reverse]",
            "Editing: Background",
            "",
            "→ Basic Colors X" + " " * 7,
            "  Grayscale    " + " " * 24,
            "",
            "",
            "Commands: ↑/↓ to change category, ←/→ to change color, "
            "Shift+←/→ to jump two, Tab to switch mode, q to quit",
        ]

    def test_foreground_mode_markers(self, renderer: FrameRenderer, small_registry: PaletteRegistry) -> None:
        state = SelectionState(
            cursor=Position(0, 2),
            foreground=Position(0, 0),
            background=Position(1, 1),
            mode=EditMode.FOREGROUND,
        )
        lines = self.plain(renderer, state, small_registry)
        assert lines[0].endswith(" BG: 233 | FG: 2")
        assert lines[3] == "Editing: Foreground"
        assert lines[5] == "→ Basic Colors   X     "
        assert lines[6] == "  Grayscale     B" + " " * 22

    def test_ellipses(self, renderer: FrameRenderer, registry: PaletteRegistry) -> None:
        state = SelectionState(cursor=Position(0, 100))
        row = self.plain(renderer, state, registry)[5]
        assert row.startswith("→ All Colors")
        assert row.endswith("…")
        assert row.count("…") == 2
        assert row.count("X") == 1

    def test_sample_uses_colors_and_styles(self, renderer: FrameRenderer, small_registry: PaletteRegistry) -> None:
        state = SelectionState(
            cursor=Position(1, 3),
            foreground=Position(0, 1),
            styles=StyleFlags(bold=True, underline=True),
        )
        lines = renderer.render(project(state, small_registry))
        assert f"\x1b[1;4;38;5;1;48;5;235m{SAMPLE_TEXT}\x1b[0m" in lines[1]
        # Padding carries the colors only
        assert lines[0].startswith("\x1b[38;5;1;48;5;235m" + " " * 32)

    def test_enabled_indicator_is_bold(self, renderer: FrameRenderer, small_registry: PaletteRegistry) -> None:
        state = SelectionState(styles=StyleFlags(italic=True))
        lines = renderer.render(project(state, small_registry))
        assert "\x1b[1;38;5;33mI\x1b[0m" in lines[1]
        assert "\x1b[38;5;33mB\x1b[0m" in lines[1]

    def test_render_text(self, renderer: FrameRenderer, fresh: SelectionState, small_registry: PaletteRegistry) -> None:
        view = project(fresh, small_registry)
        assert renderer.render_text(view) == "\n".join(renderer.render(view))

    def test_hint_lists_every_bound_command(self, renderer: FrameRenderer) -> None:
        hint = strip_ansi(renderer.render_hint())
        for keys, label in command_hints():
            assert f"{keys} {label}" in hint
