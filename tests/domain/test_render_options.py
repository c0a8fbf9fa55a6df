"""Tests for RenderOptions and Background value objects."""

import pytest

from identicons_svg.domain import (
    DEFAULT_BACKGROUND_COLOR,
    Background,
    InvalidDimensions,
    RenderOptions,
)


class TestRenderOptions:
    """Tests for RenderOptions."""

    def test_defaults(self):
        """Test width defaults to 128 and background to None."""
        options = RenderOptions(size=5, color="red")
        assert options.width == 128
        assert options.background is None

    def test_box_and_margin_width(self):
        """Test cell layout arithmetic."""
        options = RenderOptions(size=5, color="red", width=128)
        # 128 // 6 = 21, 21 // 2 + (128 % 6) // 2 = 10 + 1
        assert options.box_width == 21
        assert options.margin_width == 11

    def test_box_and_margin_even_split(self):
        """Test layout when width divides evenly."""
        options = RenderOptions(size=3, color="red", width=100)
        assert options.box_width == 25
        assert options.margin_width == 12

    @pytest.mark.parametrize("size", [0, -3])
    def test_invalid_size(self, size):
        """Test non-positive sizes raise InvalidDimensions."""
        with pytest.raises(InvalidDimensions, match="size"):
            RenderOptions(size=size, color="red")

    @pytest.mark.parametrize("width", [0, -128])
    def test_invalid_width(self, width):
        """Test non-positive widths raise InvalidDimensions."""
        with pytest.raises(InvalidDimensions, match="width"):
            RenderOptions(size=5, color="red", width=width)

    def test_empty_color_raises(self):
        """Test an empty color is rejected."""
        with pytest.raises(ValueError, match="Color"):
            RenderOptions(size=5, color="")

    def test_immutable(self):
        """Test options cannot be modified."""
        options = RenderOptions(size=5, color="red")
        with pytest.raises(AttributeError):
            options.size = 6

    def test_equality(self):
        """Test value equality."""
        assert RenderOptions(size=5, color="red") == RenderOptions(size=5, color="red")
        assert RenderOptions(size=5, color="red") != RenderOptions(size=6, color="red")


class TestBackground:
    """Tests for Background."""

    def test_defaults(self):
        """Test light gray with no rounding."""
        background = Background()
        assert background.color == DEFAULT_BACKGROUND_COLOR == "rgb(240,240,240)"
        assert background.radius == 0

    def test_negative_radius_raises(self):
        """Test negative radius is rejected."""
        with pytest.raises(ValueError, match="radius"):
            Background(radius=-1)

    def test_empty_color_raises(self):
        """Test empty color is rejected."""
        with pytest.raises(ValueError, match="color"):
            Background(color="")

    def test_hashable(self):
        """Test backgrounds are usable in sets."""
        assert Background() in {Background()}
