"""Domain services - pure business logic operations."""

from .bit_extractor import extract_bits, extract_bytes
from .grid_renderer import (
    PRESERVE_ASPECT_RATIO,
    SVG_NAMESPACE,
    background_rect,
    build_grid,
    render,
    render_grid,
)

__all__ = [
    "extract_bits",
    "extract_bytes",
    "build_grid",
    "render",
    "render_grid",
    "background_rect",
    "SVG_NAMESPACE",
    "PRESERVE_ASPECT_RATIO",
]
