"""Allow ``python -m rss_renderer``."""

from rss_renderer.cli import app

app()
