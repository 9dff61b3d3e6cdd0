"""Feed document construction: normalization, metadata, envelope and XML."""

from rss_renderer.feed.envelope import DEFAULT_NAMESPACES, clean_null_values, wrap_in_top_level
from rss_renderer.feed.metadata import assemble_channel, elevate_category, format_image_tag
from rss_renderer.feed.models import ChannelImage, FeedPayload, Meta
from rss_renderer.feed.normalize import find_tag_index, hoist_image, normalize_feed, wrap_in_item
from rss_renderer.feed.serializer import to_xml

__all__ = [
    "ChannelImage",
    "FeedPayload",
    "Meta",
    "DEFAULT_NAMESPACES",
    "assemble_channel",
    "clean_null_values",
    "elevate_category",
    "find_tag_index",
    "format_image_tag",
    "hoist_image",
    "normalize_feed",
    "to_xml",
    "wrap_in_item",
    "wrap_in_top_level",
]
