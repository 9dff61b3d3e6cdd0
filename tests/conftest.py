"""Shared fixtures for renderer tests."""

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from rss_renderer import renderer as render_module
from rss_renderer.feed.models import Meta


class FakeLog:
    """Collects calls made to the renderer's log function."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def __call__(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.calls.append((level, message, context))


@pytest.fixture
def fake_log():
    """Swap the renderer log function for a recorder."""
    fake = FakeLog()
    render_module.set_log(fake)
    yield fake
    render_module.set_log(None)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed, timezone-aware build time."""
    return datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone(timedelta(hours=-5)))


@pytest.fixture
def meta_dict() -> dict[str, Any]:
    """Minimal valid channel metadata, as sent by the content system."""
    return {
        "title": "Show",
        "description": "D",
        "link": "http://x",
    }


@pytest.fixture
def meta(meta_dict: dict[str, Any]) -> Meta:
    """Minimal valid Meta model."""
    return Meta(**meta_dict)


@pytest.fixture
def sample_feed() -> list[list[dict[str, Any]]]:
    """Two entries with categories; the first carries the channel image."""
    return [
        [
            {"title": "Ep1"},
            {"image": {"url": "http://x/cover.png"}},
            {"category": "News"},
        ],
        [
            {"title": "Ep2"},
            {"category": "Tech"},
        ],
    ]


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Sample configuration as stored in config.yaml."""
    return {
        "version": "1",
        "log_level": "INFO",
        "include_itunes_tags": True,
        "elevate_categories": False,
    }
