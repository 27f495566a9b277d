"""Palette registry - named categories of 256-color identifiers."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class PaletteError(ValueError):
    """Raised when a palette configuration is unusable."""


# Built-in palette table (category name -> 256-color indexes)
DEFAULT_PALETTE: dict[str, tuple[int, ...]] = {
    "Grayscale": tuple(range(232, 256)),
    "Basic Colors": (0, 1, 2, 3, 4, 5, 6, 7),
    "Dark Colors": (8, 9, 10, 11, 12, 13, 14, 15),
    "Red Scale": (52, 88, 124, 160, 196, 202, 208, 214, 220, 226),
    "Blue Scale": (17, 18, 19, 20, 21, 27, 33, 39, 45, 51),
    "Green Scale": (22, 28, 34, 40, 46, 82, 118, 154, 190, 226),
    "Yellow Scale": (226, 220, 214, 208, 202, 196, 190, 184, 178, 172),
    "Purple Scale": (55, 56, 57, 93, 129, 165, 201, 200, 199, 198),
    "All Colors": tuple(range(256)),
}


@dataclass(frozen=True)
class Category:
    """A named, ordered run of color identifiers."""
    name: str
    colors: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.colors)


class PaletteRegistry:
    """
    Immutable, alphabetically ordered set of palette categories.

    Validation happens once, at construction. After that every lookup
    with an in-range index succeeds.
    """

    def __init__(self, palette: Mapping[str, Sequence[int]]) -> None:
        # Validate before sorting; names are not known to be strings yet
        checked = [(name, _validate_colors(name, colors)) for name, colors in palette.items()]
        self._categories = tuple(
            Category(name, colors) for name, colors in sorted(checked, key=lambda entry: entry[0])
        )
        if not self._categories:
            raise PaletteError("Palette must contain at least one category")
        logger.debug(
            "Loaded palette with %d categories: %s",
            len(self._categories),
            ", ".join(c.name for c in self._categories),
        )

    @classmethod
    def default(cls) -> PaletteRegistry:
        """Registry built from the built-in palette table."""
        return cls(DEFAULT_PALETTE)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> PaletteRegistry:
        """
        Load a palette from a JSON file.

        The file holds a single object mapping category names to lists
        of color indexes, e.g. ``{"Mono": [0, 7, 15]}``.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise PaletteError(f"Cannot read palette file {path}: {e.strerror or e}") from e
        except json.JSONDecodeError as e:
            raise PaletteError(f"Invalid JSON in palette file {path}: {e}") from e

        if not isinstance(data, dict):
            raise PaletteError(f"Palette file {path} must contain a JSON object")
        logger.info("Loading palette from %s", path)
        return cls(data)

    def categories(self) -> tuple[Category, ...]:
        """All categories, sorted by name."""
        return self._categories

    def category(self, index: int) -> Category:
        if not 0 <= index < len(self._categories):
            raise IndexError(f"category={index} out of range (count={len(self._categories)})")
        return self._categories[index]

    def colors_of(self, index: int) -> tuple[int, ...]:
        """Color identifiers of the category at ``index``."""
        return self.category(index).colors

    def index_of(self, name: str) -> int:
        """Index of the category called ``name``."""
        for i, category in enumerate(self._categories):
            if category.name == name:
                return i
        names = ", ".join(c.name for c in self._categories)
        raise PaletteError(f"Unknown category {name!r} (available: {names})")

    def __len__(self) -> int:
        return len(self._categories)


def _validate_colors(name: object, colors: object) -> tuple[int, ...]:
    """Check one category entry and return its colors as a tuple."""
    if not isinstance(name, str) or not name.strip():
        raise PaletteError(f"Category names must be non-empty strings, got {name!r}")
    if isinstance(colors, (str, bytes)) or not isinstance(colors, Sequence):
        raise PaletteError(f"Category {name!r} must be a list of color indexes")
    if not colors:
        raise PaletteError(f"Category {name!r} has no colors")

    for color in colors:
        # bool is an int subclass but never a color
        if isinstance(color, bool) or not isinstance(color, int):
            raise PaletteError(f"Category {name!r} contains non-integer color {color!r}")
        if not 0 <= color <= 255:
            raise PaletteError(f"Category {name!r}: 256-color index must be 0-255, got {color}")
    return tuple(colors)
