"""Interactive color picker session."""

from __future__ import annotations

import logging
from typing import Optional

from ansi_color_picker.cli.core.input import InputReader, event_name
from ansi_color_picker.cli.core.terminal import Terminal
from ansi_color_picker.core.interpreter import interpret
from ansi_color_picker.core.palette import PaletteRegistry
from ansi_color_picker.core.state import SelectionState
from ansi_color_picker.core.view import View, project
from ansi_color_picker.render.ansi_text import truncate
from ansi_color_picker.render.terminal import FrameRenderer

logger = logging.getLogger(__name__)


class PickerApp:
    """
    Interactive foreground/background color picker.

    Each key event is interpreted against the current state, and the
    whole frame is re-rendered from the resulting view.
    """

    def __init__(
        self,
        registry: PaletteRegistry,
        state: Optional[SelectionState] = None,
        terminal: Optional[Terminal] = None,
        reader: Optional[InputReader] = None,
    ) -> None:
        self.registry = registry
        self.state = state if state is not None else SelectionState.initial()
        self.terminal = terminal if terminal is not None else Terminal()
        self._reader = reader
        self.renderer = FrameRenderer()
        self.running = False

    @property
    def reader(self) -> InputReader:
        if self._reader is None:
            self._reader = InputReader()
        return self._reader

    def view(self) -> View:
        return project(self.state, self.registry)

    def frame(self, width: Optional[int] = None) -> list[str]:
        """Current frame, each line cut to ``width`` columns if given."""
        lines = self.renderer.render(self.view())
        if width is None:
            return lines
        return [truncate(line, width) for line in lines]

    def handle_event(self, name: str) -> bool:
        """Apply a named event. Returns False once the session should end."""
        outcome = interpret(self.state, name, self.registry)
        self.state = outcome.state
        if outcome.quit:
            self.running = False
        return not outcome.quit

    def run(self) -> SelectionState:
        """Main application loop. Returns the final state."""
        self.running = True
        logger.info("Picker started with %d categories", len(self.registry))

        with self.terminal.managed_mode():
            while self.running:
                self._render()
                self._handle_input()

        logger.info("Picker finished: %s", self.state)
        return self.state

    def _render(self) -> None:
        """Redraw the full frame in place."""
        size = Terminal.size()
        lines = self.frame(size.cols)
        # Raw mode: lines need explicit carriage returns
        self.terminal.home()
        self.terminal.write("\r\n".join(f"{line}\x1b[K" for line in lines[:size.rows]))
        self.terminal.clear_below()

    def _handle_input(self) -> None:
        event = self.reader.read_blocking()
        name = event_name(event)
        if name is None:
            logger.debug("Unnamed key %r", event.raw)
            return
        self.handle_event(name)


def run_picker(registry: PaletteRegistry, state: Optional[SelectionState] = None) -> SelectionState:
    """Launch the picker application."""
    app = PickerApp(registry, state)
    return app.run()
