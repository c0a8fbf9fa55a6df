"""Default option construction - the only consumer of randomness."""

import string

from identicons_svg.config import IdenticonConfig
from identicons_svg.domain import Background, RandomnessProvider, RenderOptions

ALPHANUMERIC = string.ascii_letters + string.digits


class OptionsFactory:
    """Fill in missing identicon inputs from config and a randomness source.

    Explicit arguments always win; the randomness provider is only asked
    for values that were not supplied and have no configured default.
    """

    def __init__(
        self,
        randomness: RandomnessProvider,
        config: IdenticonConfig | None = None,
    ) -> None:
        self._randomness = randomness
        self._config = config or IdenticonConfig()

    @property
    def config(self) -> IdenticonConfig:
        return self._config

    def random_hash(self, length: int | None = None) -> str:
        """Hex encoding of ``length`` random alphanumeric characters."""
        count = length if length is not None else self._config.hash_length
        text = "".join(self._randomness.next_choices(ALPHANUMERIC, count))
        return text.encode("ascii").hex()

    def random_size(self) -> int:
        return self._randomness.next_range(self._config.size_min, self._config.size_max)

    def default_background(self) -> Background | None:
        return self._config.background.to_background()

    def build(
        self,
        size: int | None = None,
        width: int | None = None,
        color: str | None = None,
        background: Background | None = None,
        with_background: bool = True,
    ) -> RenderOptions:
        """Build render options, defaulting whatever was not given.

        Args:
            size: Grid side length. Random in ``[size_min, size_max)`` if None.
            width: Pixel width. Configured width if None.
            color: Fill color. Configured color, then a random one, if None.
            background: Background to use. Configured background if None.
            with_background: False drops the background entirely.

        Raises:
            InvalidDimensions: If an explicit size or width is not positive.
        """
        if size is None:
            size = self.random_size()
        if width is None:
            width = self._config.width
        if color is None:
            color = self._config.color or self._randomness.next_color()
        if not with_background:
            background = None
        elif background is None:
            background = self.default_background()

        return RenderOptions(size=size, color=color, width=width, background=background)
