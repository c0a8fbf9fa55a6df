"""Command line argument parsing."""

import argparse
from collections.abc import Sequence

from identicons_svg import __version__


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="identicons",
        description="Identicons - deterministic SVG identicons from hex hashes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "hash",
        nargs="?",
        default=None,
        help="Hex hash to render (default: random)",
    )
    parser.add_argument(
        "-s",
        "--size",
        type=_positive_int,
        default=None,
        help="Grid side length in cells (default: random from config range)",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=None,
        help="Image width and height in pixels (default: from config)",
    )
    parser.add_argument(
        "-c",
        "--color",
        default=None,
        help="Fill color for cells (default: random pleasant color)",
    )
    parser.add_argument(
        "--background",
        default=None,
        help="Background color (default: from config)",
    )
    parser.add_argument(
        "--radius",
        type=_non_negative_int,
        default=None,
        help="Background corner radius",
    )
    parser.add_argument(
        "--no-background",
        action="store_true",
        help="Omit the background rectangle",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=_positive_int,
        default=1,
        help="Number of random identicons to generate (ignored with HASH)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write SVG to this file instead of stdout",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="Seed for random defaults, for reproducible output",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (default: $IDENTICONS_CONFIG_PATH or identicons.yaml)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open the result in the default web browser",
    )
    parser.add_argument(
        "--grid",
        action="store_true",
        help="Print the cell grid in the terminal",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the HTTP server instead of rendering",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Server bind host (default: from config)",
    )
    parser.add_argument(
        "--port",
        type=_positive_int,
        default=None,
        help="Server port (default: from config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - hash: Hex hash to render, or None for random
        - size, width, color: Render overrides
        - background, radius, no_background: Background overrides
        - count: Batch size for random generation
        - output: Output file path
        - seed, config: Defaults control
        - show, grid, serve: Output modes
    """
    return build_parser().parse_args(argv)
