"""Grid to SVG rendering."""

from collections.abc import Sequence
from xml.sax.saxutils import escape

from ..entities import Grid
from ..values import Background, RenderOptions

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
PRESERVE_ASPECT_RATIO = "xMinYMin"


def _attr(value: object) -> str:
    return escape(str(value), {'"': "&quot;"})


def _element(tag: str, attributes: dict[str, object]) -> str:
    attrs = " ".join(f'{name}="{_attr(value)}"' for name, value in attributes.items())
    return f"<{tag} {attrs}/>"


def build_grid(bits: Sequence[int], size: int) -> Grid:
    """Fold ``bits`` into a ``size`` x ``size`` mirrored grid."""
    return Grid.from_bits(bits, size)


def background_rect(background: Background, width: int) -> str:
    """Full-canvas rectangle with rounded corners."""
    return _element(
        "rect",
        {
            "x": 0,
            "y": 0,
            "width": width,
            "height": width,
            "rx": background.radius,
            "ry": background.radius,
            "fill": background.color,
        },
    )


def render_grid(grid: Grid, options: RenderOptions) -> str:
    """Emit an SVG document for an already built grid.

    The background (if any) is the first child so cells paint over it.
    Cells follow in row-major order.
    """
    width = options.width
    box = options.box_width
    margin = options.margin_width

    root_attrs = {
        "width": width,
        "height": width,
        "viewBox": f"0 0 {width} {width}",
        "preserveAspectRatio": PRESERVE_ASPECT_RATIO,
        "xmlns": SVG_NAMESPACE,
    }
    opening = " ".join(f'{name}="{_attr(value)}"' for name, value in root_attrs.items())
    lines = [f"<svg {opening}>"]

    if options.background is not None:
        lines.append("  " + background_rect(options.background, width))

    for row, col in grid.filled():
        rect = _element(
            "rect",
            {
                "x": margin + col * box,
                "y": margin + row * box,
                "width": box,
                "height": box,
                "fill": options.color,
            },
        )
        lines.append("  " + rect)

    lines.append("</svg>")
    return "\n".join(lines)


def render(bits: Sequence[int], options: RenderOptions) -> str:
    """Render a bit array as an SVG identicon.

    Args:
        bits: Output of :func:`extract_bits`.
        options: Validated layout options.

    Returns:
        SVG document string, identical for identical inputs.

    Raises:
        InsufficientBitData: If ``bits`` is too short for ``options.size``.
    """
    return render_grid(build_grid(bits, options.size), options)
