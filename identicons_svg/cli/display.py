"""Terminal rendering of identicon grids."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from identicons_svg.application.services import Identicon
from identicons_svg.domain import Grid

console = Console(stderr=True)


def grid_to_blocks(grid: Grid) -> list[str]:
    """Convert a grid to half-block characters (2 rows per line).

    Each cell is two characters wide so the output looks square.
    """
    lines = []
    for row in range(0, grid.size, 2):
        line = ""
        for col in range(grid.size):
            top = grid[row, col] == 1
            bottom = row + 1 < grid.size and grid[row + 1, col] == 1
            if top and bottom:
                line += "██"
            elif top:
                line += "▀▀"
            elif bottom:
                line += "▄▄"
            else:
                line += "  "
        lines.append(line)
    return lines


def _rich_color(color: str) -> str | None:
    """Rich accepts ``#rrggbb`` and ``rgb(r,g,b)``; anything else prints plain."""
    candidate = color.replace(" ", "")
    if candidate.startswith("#") and len(candidate) == 7:
        return candidate
    if candidate.startswith("rgb("):
        return candidate
    return None


def render_grid_text(identicon: Identicon) -> Text:
    """Grid as styled rich text in the identicon's fill color."""
    style = _rich_color(identicon.options.color)
    return Text("\n".join(grid_to_blocks(identicon.grid)), style=style or "")


def display_identicon(identicon: Identicon, out: Console | None = None) -> None:
    """Print the grid next to a summary of its inputs."""
    out = out or console

    summary = Table.grid(padding=(0, 2))
    summary.add_column(justify="right", style="dim")
    summary.add_column(justify="left")
    summary.add_row("hash", identicon.hash)
    summary.add_row("size", str(identicon.options.size))
    summary.add_row("width", str(identicon.options.width))
    summary.add_row("color", identicon.options.color)
    summary.add_row("filled", str(identicon.grid.filled_count))

    table = Table.grid(padding=(0, 4))
    table.add_column(justify="left", vertical="middle")
    table.add_column(justify="left", vertical="middle")
    table.add_row(render_grid_text(identicon), summary)

    out.print()
    out.print(table)
    out.print()
