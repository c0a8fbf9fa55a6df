"""Command line entry point."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from identicons_svg.composition import create_container
from identicons_svg.container import Container
from identicons_svg.domain import Background
from identicons_svg.logging_setup import setup_logging

from .args import parse_args
from .display import console, display_identicon

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _background_override(args: argparse.Namespace, container: Container) -> Background | None:
    """Background from --background/--radius layered over config, or None."""
    if args.background is None and args.radius is None:
        return None
    configured = container.config.identicon.background
    return Background(
        color=args.background or configured.color,
        radius=args.radius if args.radius is not None else configured.radius,
    )


def _serve(args: argparse.Namespace, container: Container) -> int:
    import uvicorn

    from identicons_svg.app import create_app

    host = args.host or container.config.server.host
    port = args.port or container.config.server.port
    logger.info("Starting server host=%s port=%d", host, port)
    uvicorn.run(create_app(container), host=host, port=port)
    return EXIT_OK


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command line."""
    container = create_container(
        config_path=args.config,
        seed=args.seed,
        enable_preview=True if args.show else None,
    )

    if args.serve:
        return _serve(args, container)

    service = container.identicon_service
    background = _background_override(args, container)
    overrides = {
        "size": args.size,
        "width": args.width,
        "color": args.color,
        "background": background,
        "with_background": not args.no_background,
    }

    if args.hash is not None:
        identicons = [service.generate_random(hash_value=args.hash, **overrides)]
    else:
        identicons = list(service.generate_batch(args.count, **overrides))

    document = service.concat(identicons)

    if args.output:
        path = Path(args.output)
        path.write_text(document + "\n", encoding="utf-8")
        logger.info("Wrote %d identicon(s) to %s", len(identicons), path)
    else:
        sys.stdout.write(document + "\n")

    if args.grid:
        for identicon in identicons:
            display_identicon(identicon)

    if container.preview is not None:
        container.preview.show(document)

    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, render, and return the process exit code."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    # IdenticonError and pydantic's ValidationError are both ValueErrors
    try:
        return run(args)
    except ValueError as e:
        logger.warning("Invalid input: %s", e)
        console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
