"""Per-entry normalization and channel image hoisting."""

import logging
from collections.abc import Mapping
from typing import Any

from rss_renderer.feed.models import ChannelImage, FeedItem, Meta, TagRecord
from rss_renderer.utils.errors import UpstreamDataError

logger = logging.getLogger(__name__)


def find_tag_index(entry: FeedItem, tag: str) -> int:
    """Find the index of the first tag-record keyed ``tag``.

    Args:
        entry: Sequence of tag-records
        tag: Tag name to look for

    Returns:
        Index of the record, or -1 if no record has that key
    """
    for index, record in enumerate(entry):
        if isinstance(record, Mapping) and tag in record:
            return index
    return -1


def wrap_in_item(entry: Any) -> dict[str, FeedItem]:
    """Wrap a feed entry under an ``item`` key.

    The first ``image`` record is dropped: it carries channel-level data and
    is not a valid item field. The caller's list is left untouched.

    Raises:
        UpstreamDataError: If the entry is not a list of tag-records
    """
    if not isinstance(entry, list):
        raise UpstreamDataError(
            f"Feed entries must be lists of tag-records, got {type(entry).__name__}"
        )

    records = list(entry)
    image_index = find_tag_index(records, "image")
    if image_index != -1:
        del records[image_index]

    return {"item": records}


def normalize_feed(feed: list[Any]) -> list[dict[str, FeedItem]]:
    """Wrap every entry of the feed, preserving order."""
    return [wrap_in_item(entry) for entry in feed]


def _image_url(record: TagRecord) -> str | None:
    value = record.get("image")
    if isinstance(value, Mapping):
        return value.get("url") or None
    return None


def hoist_image(feed: list[Any], meta: Meta) -> Meta:
    """Derive the channel image from the first feed entry.

    Only ``feed[0]`` is consulted: RSS channels carry a single image, and
    images found in later entries are stripped by :func:`wrap_in_item` but
    otherwise discarded.

    Args:
        feed: Raw (not yet wrapped) feed entries
        meta: Channel metadata supplied by the caller

    Returns:
        A copy of ``meta`` with ``image`` set when the first entry has an
        image with a non-empty url, otherwise ``meta`` itself
    """
    if not feed or not isinstance(feed[0], list):
        return meta

    first = feed[0]
    image_index = find_tag_index(first, "image")
    if image_index == -1:
        return meta

    url = _image_url(first[image_index])
    if not url:
        logger.debug("First feed entry has an image record without a url")
        return meta

    return meta.model_copy(update={"image": ChannelImage(url=url)})
