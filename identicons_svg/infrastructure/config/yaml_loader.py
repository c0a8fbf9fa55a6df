"""YAML configuration loader."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "identicons.yaml"
CONFIG_PATH_ENV = "IDENTICONS_CONFIG_PATH"


class YAMLConfigLoader:
    """Load raw identicon settings from a YAML file."""

    def __init__(self, config_path: Path | str | None = None) -> None:
        if config_path is None:
            config_path = os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)
        self._config_path = Path(config_path)

    def load(self) -> dict[str, Any]:
        """Load raw configuration data from YAML.

        Returns:
            Configuration dictionary, empty dict if file not found.

        Raises:
            ValueError: If the document is not a mapping.
        """
        if not self._config_path.exists():
            logger.debug("Config file not found path=%s, using defaults", self._config_path)
            return {}

        with open(self._config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {self._config_path}")
        logger.debug("Loaded config path=%s keys=%s", self._config_path, sorted(data))
        return data

    @property
    def path(self) -> Path:
        """Get configuration file path."""
        return self._config_path
