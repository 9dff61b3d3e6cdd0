"""Data models for feed payloads.

Feed items stay plain lists of single-key dicts ("tag-records"): that is the
shape both the upstream content system and the XML serializer speak. Only the
channel metadata and the payload envelope are modeled with Pydantic.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TagRecord = dict[str, Any]
FeedItem = list[TagRecord]

DOCS_URL = "http://blogs.law.harvard.edu/tech/rss"
GENERATOR_MESSAGE = "Feed delivered by Clay"


class ChannelImage(BaseModel):
    """Channel-level image derived from the first feed entry."""

    url: str


class Meta(BaseModel):
    """Channel metadata for a rendered feed.

    ``title``, ``description`` and ``link`` are required for a valid channel
    but are checked when the channel is assembled, so that a missing field
    surfaces as :class:`MissingRequiredFieldError` rather than a schema error.

    Keys are accepted in camelCase (as sent by the content system) or
    snake_case.

    Example:
        >>> meta = Meta(
        ...     title="The Show",
        ...     description="Weekly episodes",
        ...     link="https://example.com",
        ...     elevateChannelCategories=False,
        ... )
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    link: str | None = None

    copyright: str | int | None = None
    generator: str | None = None
    docs: str | None = None
    opt: list[TagRecord] | None = None
    image: ChannelImage | None = None
    elevate_channel_categories: bool = True

    # iTunes podcast namespace
    author: str | None = None
    subtitle: str | None = None
    explicit: bool | None = None
    itunes_category: str | None = None
    owner_name: str | None = None
    owner_email: str | None = None


class FeedPayload(BaseModel):
    """Everything the renderer receives for one response."""

    feed: list[Any] = Field(default_factory=list)
    meta: Meta
    attr: dict[str, Any] | None = None
