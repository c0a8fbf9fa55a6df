"""Domain ports - interfaces for infrastructure to implement."""

from .randomness_port import RandomnessProvider

__all__ = [
    "RandomnessProvider",
]
