"""Render options value objects."""

from dataclasses import dataclass

from ..errors import InvalidDimensions

# Business defaults
DEFAULT_WIDTH = 128
DEFAULT_BACKGROUND_COLOR = "rgb(240,240,240)"
DEFAULT_BACKGROUND_RADIUS = 0


@dataclass(frozen=True, slots=True)
class Background:
    """Full-canvas rectangle drawn beneath the grid."""

    color: str = DEFAULT_BACKGROUND_COLOR
    radius: int = DEFAULT_BACKGROUND_RADIUS

    def __post_init__(self) -> None:
        if not self.color:
            raise ValueError("Background color must not be empty")
        if self.radius < 0:
            raise ValueError("Background radius must not be negative")


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Layout parameters for one identicon (value object).

    Dimensions are checked here so the renderer never divides by zero.
    """

    size: int
    color: str
    width: int = DEFAULT_WIDTH
    background: Background | None = None

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise InvalidDimensions(f"size must be positive, got {self.size}")
        if self.width <= 0:
            raise InvalidDimensions(f"width must be positive, got {self.width}")
        if not self.color:
            raise ValueError("Color must not be empty")

    @property
    def box_width(self) -> int:
        """Pixel side length of one grid cell."""
        return self.width // (self.size + 1)

    @property
    def margin_width(self) -> int:
        """Pixel offset from the canvas edge to the first cell."""
        return self.box_width // 2 + (self.width % (self.size + 1)) // 2
