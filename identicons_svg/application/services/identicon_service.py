"""Identicon service - runs the hash to SVG pipeline."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from identicons_svg.domain import (
    Background,
    Grid,
    RenderOptions,
    build_grid,
    extract_bits,
    render_grid,
)

from .options_factory import OptionsFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Identicon:
    """A generated identicon and the inputs that produced it."""

    hash: str
    options: RenderOptions
    grid: Grid
    svg: str


class IdenticonService:
    """Service for generating identicons.

    Rendering is pure; randomness only enters through the options factory.
    """

    def __init__(self, options_factory: OptionsFactory) -> None:
        self._options_factory = options_factory

    @property
    def options_factory(self) -> OptionsFactory:
        return self._options_factory

    def generate(self, hash_value: str, options: RenderOptions) -> str:
        """Render ``hash_value`` with fixed options.

        Raises:
            IdenticonError: On malformed hash or too few bits for the size.
        """
        return self.create(hash_value, options).svg

    def create(self, hash_value: str, options: RenderOptions) -> Identicon:
        """Render and keep the intermediate grid."""
        bits = extract_bits(hash_value)
        grid = build_grid(bits, options.size)
        svg = render_grid(grid, options)
        logger.debug(
            "Rendered identicon hash=%s size=%d width=%d filled=%d",
            hash_value,
            options.size,
            options.width,
            grid.filled_count,
        )
        return Identicon(hash=hash_value, options=options, grid=grid, svg=svg)

    def generate_random(
        self,
        hash_value: str | None = None,
        size: int | None = None,
        width: int | None = None,
        color: str | None = None,
        background: Background | None = None,
        with_background: bool = True,
    ) -> Identicon:
        """Generate an identicon, defaulting any input not supplied."""
        if hash_value is None:
            hash_value = self._options_factory.random_hash()
        options = self._options_factory.build(
            size=size,
            width=width,
            color=color,
            background=background,
            with_background=with_background,
        )
        return self.create(hash_value, options)

    def generate_batch(
        self,
        count: int,
        size: int | None = None,
        width: int | None = None,
        color: str | None = None,
        background: Background | None = None,
        with_background: bool = True,
    ) -> Iterator[Identicon]:
        """Lazily generate ``count`` identicons from random hashes.

        Each item draws its own hash, and its own size and color unless fixed.
        """
        if count < 0:
            raise ValueError("count must not be negative")
        logger.info("Generating batch count=%d", count)
        for _ in range(count):
            yield self.generate_random(
                size=size,
                width=width,
                color=color,
                background=background,
                with_background=with_background,
            )

    @staticmethod
    def concat(identicons: Iterable[Identicon]) -> str:
        """Join the documents of a batch into one string."""
        return "\n".join(icon.svg for icon in identicons)
