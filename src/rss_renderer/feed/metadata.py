"""Channel metadata assembly.

Builds the ordered list of channel-level tag-records that precede the feed
items:

- site metadata (title, description, link, lastBuildDate, docs, copyright,
  generator) and caller-supplied ``opt`` records
- the optional iTunes podcast block
- the optional channel image
- the optional elevated category summary
"""

from datetime import datetime
from email.utils import format_datetime
from typing import Any

from rss_renderer.feed.models import DOCS_URL, GENERATOR_MESSAGE, Meta, TagRecord
from rss_renderer.utils.errors import MissingRequiredFieldError

REQUIRED_FIELDS = ("title", "description", "link")
REQUIRED_FIELDS_MESSAGE = (
    "A `title`, `description` and `link` property are all required "
    "in the `meta` object for the RSS renderer"
)


def format_build_date(now: datetime) -> str:
    """Format a timestamp as RFC 822, e.g. ``Mon, 19 Oct 2026 09:30:00 +0200``."""
    if now.tzinfo is None:
        now = now.astimezone()
    return format_datetime(now)


def format_image_tag(url: str, link: str, title: str) -> TagRecord:
    """Build the channel ``image`` record."""
    return {"image": [{"url": url}, {"link": link}, {"title": title}]}


def elevate_category(items: list[dict[str, Any]]) -> list[TagRecord]:
    """Summarize item categories into a single channel category record.

    Args:
        items: Wrapped items (``{"item": [...]}``)

    Returns:
        ``[{"category": "a,b,..."}]`` with every non-empty category in item
        order, or an empty list when no item has one
    """
    categories = [
        str(record["category"])
        for wrapped in items
        for record in wrapped["item"]
        if isinstance(record, dict) and record.get("category")
    ]
    if not categories:
        return []
    return [{"category": ",".join(categories)}]


def itunes_tags(meta: Meta) -> list[TagRecord]:
    """Build the iTunes podcast namespace records for the channel."""
    tags: list[TagRecord] = [{"itunes:author": meta.author or meta.title}]

    if meta.subtitle:
        tags.append({"itunes:subtitle": meta.subtitle})

    tags.append({"itunes:summary": meta.description})
    tags.append({"itunes:explicit": "yes" if meta.explicit else "no"})

    if meta.image is not None and meta.image.url:
        tags.append({"itunes:image": [{"_attr": {"href": meta.image.url}}]})

    if meta.itunes_category:
        tags.append({"itunes:category": [{"_attr": {"text": meta.itunes_category}}]})

    if meta.owner_email:
        owner: list[TagRecord] = []
        if meta.owner_name:
            owner.append({"itunes:name": meta.owner_name})
        owner.append({"itunes:email": meta.owner_email})
        tags.append({"itunes:owner": owner})

    return tags


def check_required_fields(meta: Meta) -> None:
    """Raise if any of title, description or link is missing or empty."""
    missing = [name for name in REQUIRED_FIELDS if not getattr(meta, name)]
    if missing:
        raise MissingRequiredFieldError(REQUIRED_FIELDS_MESSAGE, fields=missing)


def assemble_channel(
    meta: Meta,
    items: list[dict[str, Any]],
    *,
    include_itunes_tags: bool = False,
    elevate_categories: bool = True,
    now: datetime | None = None,
) -> list[TagRecord]:
    """Assemble the full channel content: metadata followed by items.

    Args:
        meta: Channel metadata (already carrying the hoisted image, if any)
        items: Wrapped feed items, in feed order
        include_itunes_tags: Emit the iTunes podcast block
        elevate_categories: Allow the category summary record; it is emitted
            only when ``meta.elevate_channel_categories`` is also true
        now: Build time; defaults to the current local time

    Returns:
        Ordered channel tag-records

    Raises:
        MissingRequiredFieldError: If title, description or link is missing
    """
    check_required_fields(meta)

    if now is None:
        now = datetime.now().astimezone()

    channel: list[TagRecord] = [
        {"title": meta.title},
        {"description": meta.description},
        {"link": meta.link},
        {"lastBuildDate": format_build_date(now)},
        {"docs": meta.docs if meta.docs is not None else DOCS_URL},
        {"copyright": meta.copyright or now.year},
        {"generator": meta.generator if meta.generator is not None else GENERATOR_MESSAGE},
    ]

    if meta.opt:
        channel.extend(meta.opt)

    if include_itunes_tags:
        channel.extend(itunes_tags(meta))

    if meta.image is not None and meta.image.url:
        channel.append(format_image_tag(meta.image.url, meta.link, meta.title))

    if elevate_categories and meta.elevate_channel_categories:
        channel.extend(elevate_category(items))

    channel.extend(items)
    return channel
