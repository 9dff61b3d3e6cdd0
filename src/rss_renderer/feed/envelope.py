"""Top-level ``rss``/``channel`` envelope."""

from typing import Any

from rss_renderer.feed.models import TagRecord

DEFAULT_NAMESPACES: dict[str, str] = {
    "version": "2.0",
    "xmlns:content": "http://purl.org/rss/1.0/modules/content/",
    "xmlns:mi": "http://schemas.ingestion.microsoft.com/common/",
    "xmlns:dc": "http://purl.org/dc/elements/1.1/",
    "xmlns:media": "http://search.yahoo.com/mrss/",
}
ITUNES_NAMESPACE = {"xmlns:itunes": "http://www.itunes.com/dtds/podcast-1.0.dtd"}


def clean_null_values(attrs: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``attrs`` without falsy values."""
    return {name: value for name, value in attrs.items() if value}


def wrap_in_top_level(
    data: list[TagRecord],
    attr: dict[str, Any] | None = None,
    *,
    include_itunes_tags: bool = False,
) -> dict[str, Any]:
    """Wrap channel content in the ``rss`` and ``channel`` elements.

    Args:
        data: Channel content (metadata records followed by items)
        attr: Root attribute overrides; set a namespace to ``None`` to drop it
        include_itunes_tags: Declare the iTunes namespace by default

    Returns:
        Document tree ready for serialization
    """
    attrs = dict(DEFAULT_NAMESPACES)
    if include_itunes_tags:
        attrs.update(ITUNES_NAMESPACE)
    attrs.update(attr or {})

    return {
        "rss": [
            {"_attr": clean_null_values(attrs)},
            {"channel": data},
        ]
    }
