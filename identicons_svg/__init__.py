"""Deterministic SVG identicons from hexadecimal hashes."""

from identicons_svg.domain import (
    DEFAULT_WIDTH,
    Background,
    IdenticonError,
    InsufficientBitData,
    InvalidDimensions,
    InvalidHashFormat,
    RenderOptions,
    extract_bits,
    render,
)

__version__ = "0.1.0"


def generate(
    hash_value: str,
    size: int,
    width: int = DEFAULT_WIDTH,
    color: str | None = None,
    background: Background | None = None,
) -> str:
    """Generate an SVG identicon for ``hash_value``.

    When ``color`` is None a random pleasant color is picked; everything
    else is deterministic.

    Example:
        >>> svg = generate("6a556d38357143305a4d6642724e45", 5, 128, "#3b82f6")
    """
    if color is None:
        from identicons_svg.infrastructure.randomness import SystemRandomness

        color = SystemRandomness().next_color()
    options = RenderOptions(size=size, color=color, width=width, background=background)
    return render(extract_bits(hash_value), options)


__all__ = [
    "__version__",
    "generate",
    "Background",
    "RenderOptions",
    "IdenticonError",
    "InvalidHashFormat",
    "InvalidDimensions",
    "InsufficientBitData",
    "extract_bits",
    "render",
]
