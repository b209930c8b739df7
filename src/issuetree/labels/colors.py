"""Unique label color allocation."""

from __future__ import annotations

import random

PRESET_COLORS: tuple[str, ...] = (
    "B60205",
    "D93F0B",
    "FBCA04",
    "0E8A16",
    "006B75",
    "1D76DB",
    "0052CC",
    "5319E7",
    "E99695",
    "F9D0C4",
    "FEF2C0",
    "C2E0C6",
    "BFDADC",
    "C5DEF5",
    "BFD4F2",
    "D4C5F9",
    "D73A4A",
    "A2EEEF",
    "7057FF",
    "008672",
)
FALLBACK_COLOR = "CCCCCC"
RANDOM_ATTEMPTS = 100
# Channel range keeps generated colors away from near-black and near-white.
CHANNEL_MIN = 50
CHANNEL_MAX = 230


class ColorAllocator:
    """Hands out label colors that are not yet in use.

    Args:
        rng: Random source for colors beyond the preset palette.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def allocate(self, used_colors: set[str]) -> str:
        """Return an unused uppercase hex color and add it to *used_colors*.

        Presets are tried in order, then up to ``RANDOM_ATTEMPTS`` random
        colors. If every attempt collides, :data:`FALLBACK_COLOR` is returned
        even though it may already be in use.
        """
        taken = {color.upper() for color in used_colors}
        for color in PRESET_COLORS:
            if color not in taken:
                used_colors.add(color)
                return color

        for _ in range(RANDOM_ATTEMPTS):
            color = self._random_color()
            if color not in taken:
                used_colors.add(color)
                return color

        return FALLBACK_COLOR

    def _random_color(self) -> str:
        r, g, b = (self._rng.randrange(CHANNEL_MIN, CHANNEL_MAX) for _ in range(3))
        return f"{r:02X}{g:02X}{b:02X}"
