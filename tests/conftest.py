"""Shared fixtures for picker tests."""

import pytest

from ansi_color_picker.core.palette import PaletteRegistry
from ansi_color_picker.core.state import SelectionState


# Two categories of different lengths: "Basic Colors" sorts first
SMALL_PALETTE = {
    "Grayscale": list(range(232, 256)),
    "Basic Colors": list(range(8)),
}


@pytest.fixture
def registry() -> PaletteRegistry:
    """The built-in palette."""
    return PaletteRegistry.default()


@pytest.fixture
def small_registry() -> PaletteRegistry:
    """Basic Colors (8) and Grayscale (24)."""
    return PaletteRegistry(SMALL_PALETTE)


@pytest.fixture
def fresh() -> SelectionState:
    return SelectionState.initial()
