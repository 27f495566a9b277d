"""Input interpreter - maps named key events onto state transitions.

Key bindings live in one table, so the on-screen command hint is
generated from the same definitions that drive the state machine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ansi_color_picker.core.palette import PaletteRegistry
from ansi_color_picker.core.state import (
    LARGE_STEP,
    SelectionState,
    Style,
    move_category,
    move_color,
    toggle_mode,
    toggle_style,
)

logger = logging.getLogger(__name__)

QUIT = "quit"

Transition = Callable[[SelectionState, PaletteRegistry], SelectionState]


@dataclass(frozen=True)
class Binding:
    """A named key event and the transition it triggers.

    Attributes:
        event: Event name as delivered by the input layer
        apply: Transition function, None for quit
        keys: Key display for the command hint ('' keeps it out of the hint)
        label: What the keys do, as shown in the command hint
    """
    event: str
    apply: Transition | None = None
    keys: str = ""
    label: str = ""


@dataclass(frozen=True)
class Outcome:
    """Result of interpreting one event."""
    state: SelectionState
    quit: bool = False


def _style_binding(style: Style) -> Binding:
    return Binding(style.hotkey, lambda state, registry: toggle_style(state, style))


# Paired keys (up/down, left/right) share one hint on the first of the pair
BINDINGS: tuple[Binding, ...] = (
    Binding("up", lambda s, r: move_category(s, r, -1), "↑/↓", "to change category"),
    Binding("down", lambda s, r: move_category(s, r, 1)),
    Binding("left", lambda s, r: move_color(s, r, -1), "←/→", "to change color"),
    Binding("right", lambda s, r: move_color(s, r, 1)),
    Binding("shift-left", lambda s, r: move_color(s, r, -LARGE_STEP), "Shift+←/→", "to jump two"),
    Binding("shift-right", lambda s, r: move_color(s, r, LARGE_STEP)),
    Binding("tab", lambda s, r: toggle_mode(s), "Tab", "to switch mode"),
    *(_style_binding(style) for style in Style),
    Binding(QUIT, None, "q", "to quit"),
)

_BY_EVENT: dict[str, Binding] = {binding.event: binding for binding in BINDINGS}


def command_hints() -> list[tuple[str, str]]:
    """(keys, label) pairs for the command hint, in binding order."""
    return [(b.keys, b.label) for b in BINDINGS if b.keys]


def interpret(state: SelectionState, event: str, registry: PaletteRegistry) -> Outcome:
    """
    Apply one named key event to ``state``.

    Unknown events leave the state untouched. ``quit`` never changes the
    state; it only sets ``Outcome.quit``.
    """
    binding = _BY_EVENT.get(event)
    if binding is None:
        logger.debug("Ignoring unbound event %r", event)
        return Outcome(state)

    if binding.apply is None:
        logger.debug("Quit requested")
        return Outcome(state, quit=True)

    new_state = binding.apply(state, registry)
    logger.debug("%s -> cursor=%s mode=%s", event, new_state.cursor, new_state.mode.value)
    return Outcome(new_state)
