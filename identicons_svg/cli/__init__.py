"""Command line interface."""

from .args import build_parser, parse_args
from .main import main

__all__ = [
    "build_parser",
    "parse_args",
    "main",
]
