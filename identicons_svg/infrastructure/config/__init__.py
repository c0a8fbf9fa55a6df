"""Configuration infrastructure - loading."""

from .yaml_loader import DEFAULT_CONFIG_PATH, YAMLConfigLoader

__all__ = [
    "YAMLConfigLoader",
    "DEFAULT_CONFIG_PATH",
]
