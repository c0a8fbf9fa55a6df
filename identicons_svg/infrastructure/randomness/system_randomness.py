"""Randomness provider backed by ``random.Random``."""

import colorsys
import random
from collections.abc import Sequence

# Bright, saturated palette bounds (HSV, 0..1)
SATURATION_RANGE = (0.55, 0.95)
VALUE_RANGE = (0.70, 0.95)


def hsv_to_hex(hue: float, saturation: float, value: float) -> str:
    """Convert HSV components in ``[0, 1]`` to ``#rrggbb``."""
    r, g, b = colorsys.hsv_to_rgb(hue, saturation, value)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


class SystemRandomness:
    """Implements RandomnessProvider with a private ``random.Random``.

    Pass a seed to get a reproducible sequence.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        self._rng = random.Random(seed)

    def next_choices(self, population: Sequence[str], count: int) -> list[str]:
        return self._rng.choices(population, k=count)

    def next_range(self, low: int, high: int) -> int:
        return self._rng.randrange(low, high)

    def next_color(self) -> str:
        hue = self._rng.random()
        saturation = self._rng.uniform(*SATURATION_RANGE)
        value = self._rng.uniform(*VALUE_RANGE)
        return hsv_to_hex(hue, saturation, value)
