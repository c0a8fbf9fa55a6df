"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import Grid, required_bits

# Errors
from .errors import (
    IdenticonError,
    InsufficientBitData,
    InvalidDimensions,
    InvalidHashFormat,
)

# Ports
from .ports import RandomnessProvider

# Services
from .services import (
    SVG_NAMESPACE,
    build_grid,
    extract_bits,
    extract_bytes,
    render,
    render_grid,
)

# Value Objects
from .values import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BACKGROUND_RADIUS,
    DEFAULT_WIDTH,
    Background,
    RenderOptions,
    validate_hash,
)

__all__ = [
    # Values
    "RenderOptions",
    "Background",
    "DEFAULT_WIDTH",
    "DEFAULT_BACKGROUND_COLOR",
    "DEFAULT_BACKGROUND_RADIUS",
    "validate_hash",
    # Entities
    "Grid",
    "required_bits",
    # Errors
    "IdenticonError",
    "InvalidHashFormat",
    "InvalidDimensions",
    "InsufficientBitData",
    # Services
    "extract_bits",
    "extract_bytes",
    "build_grid",
    "render",
    "render_grid",
    "SVG_NAMESPACE",
    # Ports
    "RandomnessProvider",
]
