"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from identicons_svg.application.services import IdenticonService, OptionsFactory
from identicons_svg.config import Config
from identicons_svg.domain import RandomnessProvider
from identicons_svg.infrastructure.preview import BrowserPreview


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    """

    # Services
    identicon_service: IdenticonService
    options_factory: OptionsFactory

    # Randomness source for defaults
    randomness: RandomnessProvider

    # Configuration
    config: Config

    # Optional display sink, only present when preview is enabled
    preview: BrowserPreview | None = None

    @property
    def preview_enabled(self) -> bool:
        return self.preview is not None
