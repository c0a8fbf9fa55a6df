"""Domain entities."""

from .grid import Grid, required_bits

__all__ = [
    "Grid",
    "required_bits",
]
