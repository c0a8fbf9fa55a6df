"""Domain value objects - immutable data structures."""

from .hash_string import byte_count, validate_hash
from .render_options import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BACKGROUND_RADIUS,
    DEFAULT_WIDTH,
    Background,
    RenderOptions,
)

__all__ = [
    "RenderOptions",
    "Background",
    "DEFAULT_WIDTH",
    "DEFAULT_BACKGROUND_COLOR",
    "DEFAULT_BACKGROUND_RADIUS",
    "validate_hash",
    "byte_count",
]
