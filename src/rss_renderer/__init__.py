"""RSS renderer: turn feed payloads into RSS 2.0 responses."""

from rss_renderer.renderer import build_document, render, send_error, set_log
from rss_renderer.response import BufferedResponse, ResponseWriter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BufferedResponse",
    "ResponseWriter",
    "build_document",
    "render",
    "send_error",
    "set_log",
]
