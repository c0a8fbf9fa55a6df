"""ASGI application factory for uvicorn.

Usage:
    uvicorn identicons_svg.asgi:create_app_from_env --factory
"""

import os

from identicons_svg.composition import create_container
from identicons_svg.logging_setup import setup_logging_from_env


def create_app_from_env():
    """Create FastAPI app from environment variables.

    Environment variables:
        IDENTICONS_CONFIG_PATH: Path to config file (default: identicons.yaml)
        IDENTICONS_SEED: Seed for random defaults
        IDENTICONS_LOG_LEVEL: Log level (default: INFO)
    """
    from identicons_svg.app import create_app

    setup_logging_from_env()
    container = create_container(
        config_path=os.environ.get("IDENTICONS_CONFIG_PATH"),
        seed=os.environ.get("IDENTICONS_SEED"),
        enable_preview=False,
    )
    return create_app(container)
