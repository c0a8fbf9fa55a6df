"""Randomness infrastructure."""

from .system_randomness import SystemRandomness, hsv_to_hex

__all__ = [
    "SystemRandomness",
    "hsv_to_hex",
]
