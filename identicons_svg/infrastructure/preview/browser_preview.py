"""Open rendered identicons in the default web browser."""

import logging
import tempfile
import webbrowser
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Identicon preview</title>
</head>
<body>
{body}
</body>
</html>
"""


def wrap_html(svg: str) -> str:
    """Embed one or more SVG documents in a minimal HTML page."""
    return HTML_TEMPLATE.format(body=svg)


class BrowserPreview:
    """Display sink writing an HTML page to a temp file and opening it.

    Args:
        opener: Called with the ``file://`` URI. Defaults to ``webbrowser.open``.
        directory: Where temp files go. Defaults to the system temp dir.
    """

    def __init__(
        self,
        opener: Callable[[str], object] | None = None,
        directory: Path | str | None = None,
    ) -> None:
        self._opener = opener or webbrowser.open
        self._directory = Path(directory) if directory is not None else None

    def write(self, svg: str) -> Path:
        """Write the HTML wrapper and return its absolute path."""
        with tempfile.NamedTemporaryFile(
            "w",
            suffix=".html",
            prefix="identicon-",
            dir=self._directory,
            delete=False,
            encoding="utf-8",
        ) as f:
            f.write(wrap_html(svg))
        return Path(f.name).resolve()

    def show(self, svg: str) -> Path:
        """Write the preview page and hand it to the browser."""
        path = self.write(svg)
        logger.info("Opening preview path=%s", path)
        self._opener(path.as_uri())
        return path
