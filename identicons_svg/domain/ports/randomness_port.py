"""Randomness port - source of non-deterministic defaults."""

from collections.abc import Sequence
from typing import Protocol


class RandomnessProvider(Protocol):
    """Protocol for random values used when building default options.

    The rendering pipeline never calls this; only option construction does.
    """

    def next_choices(self, population: Sequence[str], count: int) -> list[str]:
        """Return ``count`` items drawn uniformly, with replacement, from ``population``."""
        ...

    def next_range(self, low: int, high: int) -> int:
        """Return a random int in ``[low, high)``."""
        ...

    def next_color(self) -> str:
        """Return a random, visually pleasant ``#rrggbb`` color."""
        ...
