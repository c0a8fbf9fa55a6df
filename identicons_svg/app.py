"""FastAPI application serving identicons over HTTP."""

import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response

from identicons_svg import __version__
from identicons_svg.composition import create_container
from identicons_svg.container import Container
from identicons_svg.domain import Background, IdenticonError

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
DEFAULT_SIZE = 5
MAX_SIZE = 64
MAX_WIDTH = 4096


def _background(
    container: Container,
    color: str | None,
    radius: int | None,
) -> Background | None:
    if color is None and radius is None:
        return None
    configured = container.config.identicon.background
    return Background(
        color=color or configured.color,
        radius=radius if radius is not None else configured.radius,
    )


def _svg_response(svg: str, cache: bool) -> Response:
    headers = {"Cache-Control": "public, max-age=86400" if cache else "no-store"}
    return Response(content=svg, media_type=SVG_MEDIA_TYPE, headers=headers)


def create_app(container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        container: Wired dependencies. Built from defaults when None.
    """
    app = FastAPI(
        title="Identicons",
        description="Deterministic SVG identicons from hex hashes",
        version=__version__,
    )
    app.state.container = container or create_container()

    @app.exception_handler(IdenticonError)
    async def identicon_error_handler(request: Request, exc: IdenticonError):
        """Map domain errors to 422."""
        logger.warning("Rejected request path=%s error=%s", request.url.path, exc)
        return JSONResponse(
            {"error": type(exc).__name__, "detail": str(exc)},
            status_code=422,
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/identicon/{hash_value}.svg")
    async def identicon(
        request: Request,
        hash_value: str,
        size: int = Query(DEFAULT_SIZE, ge=1, le=MAX_SIZE),
        width: int | None = Query(None, ge=1, le=MAX_WIDTH),
        color: str | None = Query(None),
        background: str | None = Query(None),
        radius: int | None = Query(None, ge=0),
        no_background: bool = Query(False),
    ):
        """Render a deterministic identicon for ``hash_value``.

        ``size`` defaults to a fixed 5 rather than the configured
        ``size_min``/``size_max`` range, so a given URL always renders the
        same grid. ``width`` defaults to the configured width. Without
        ``color`` the configured color is used, or a random one, in which
        case the response is not cacheable.
        """
        container: Container = request.app.state.container
        fixed_color = color or container.config.identicon.color
        icon = container.identicon_service.generate_random(
            hash_value=hash_value,
            size=size,
            width=width,
            color=fixed_color,
            background=_background(container, background, radius),
            with_background=not no_background,
        )
        return _svg_response(icon.svg, cache=fixed_color is not None)

    @app.get("/random.svg")
    async def random_identicon(request: Request):
        """Render an identicon from a random hash with default options."""
        container: Container = request.app.state.container
        icon = container.identicon_service.generate_random()
        logger.info("Random identicon hash=%s size=%d", icon.hash, icon.options.size)
        return _svg_response(icon.svg, cache=False)

    return app
