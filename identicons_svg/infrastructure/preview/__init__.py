"""Optional preview sinks."""

from .browser_preview import BrowserPreview, wrap_html

__all__ = [
    "BrowserPreview",
    "wrap_html",
]
