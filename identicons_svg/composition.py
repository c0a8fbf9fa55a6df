"""Composition root - the ONLY place where dependencies are wired."""

import logging
from pathlib import Path

from identicons_svg.application.services import IdenticonService, OptionsFactory
from identicons_svg.config import Config, load_config
from identicons_svg.container import Container
from identicons_svg.domain import RandomnessProvider
from identicons_svg.infrastructure.preview import BrowserPreview
from identicons_svg.infrastructure.randomness import SystemRandomness

logger = logging.getLogger(__name__)


def create_container(
    config_path: Path | str | None = None,
    config: Config | None = None,
    seed: int | str | None = None,
    randomness: RandomnessProvider | None = None,
    enable_preview: bool | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    Args:
        config_path: Path to config file, ignored when ``config`` is given.
        config: Already loaded configuration.
        seed: Seed for the default randomness source.
        randomness: Replaces the default randomness source entirely.
        enable_preview: Overrides ``preview.enabled`` from config.

    Returns:
        Fully wired dependency container.
    """
    if config is None:
        config = load_config(config_path)

    if randomness is None:
        randomness = SystemRandomness(seed)

    options_factory = OptionsFactory(randomness, config.identicon)
    identicon_service = IdenticonService(options_factory)

    preview_on = config.preview.enabled if enable_preview is None else enable_preview
    preview = BrowserPreview() if preview_on else None

    logger.debug(
        "Container created seeded=%s preview=%s",
        seed is not None,
        preview_on,
    )

    return Container(
        identicon_service=identicon_service,
        options_factory=options_factory,
        randomness=randomness,
        config=config,
        preview=preview,
    )
