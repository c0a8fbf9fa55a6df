"""Application services - use case orchestration."""

from .identicon_service import Identicon, IdenticonService
from .options_factory import ALPHANUMERIC, OptionsFactory

__all__ = [
    "Identicon",
    "IdenticonService",
    "OptionsFactory",
    "ALPHANUMERIC",
]
