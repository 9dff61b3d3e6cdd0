"""Tests for channel metadata assembly."""

from datetime import datetime

import pytest

from rss_renderer.feed.metadata import (
    REQUIRED_FIELDS_MESSAGE,
    assemble_channel,
    elevate_category,
    format_build_date,
    format_image_tag,
    itunes_tags,
)
from rss_renderer.feed.models import DOCS_URL, GENERATOR_MESSAGE, ChannelImage, Meta
from rss_renderer.utils.errors import MissingRequiredFieldError


def keys(records: list[dict]) -> list[str]:
    """Return the tag name of each record."""
    return [next(iter(r)) for r in records]


def value_of(records: list[dict], tag: str):
    """Return the value of the first record with the given tag."""
    for record in records:
        if tag in record:
            return record[tag]
    raise KeyError(tag)


class TestElevateCategory:
    """Tests for elevate_category."""

    def test_joins_categories_in_item_order(self) -> None:
        """Test that categories of all items become one comma-joined record."""
        items = [
            {"item": [{"title": "Ep1"}, {"category": "News"}]},
            {"item": [{"title": "Ep2"}, {"category": "Tech"}]},
        ]
        assert elevate_category(items) == [{"category": "News,Tech"}]

    def test_multiple_categories_in_one_item(self) -> None:
        """Test items carrying several category records."""
        items = [{"item": [{"category": "a"}, {"category": "b"}]}, {"item": [{"category": "c"}]}]
        assert elevate_category(items) == [{"category": "a,b,c"}]

    def test_skips_items_without_category(self) -> None:
        """Test non-uniform entries."""
        items = [{"item": [{"title": "1"}]}, {"item": [{"category": "Tech"}]}]
        assert elevate_category(items) == [{"category": "Tech"}]

    def test_skips_empty_categories(self) -> None:
        """Test that empty category values are ignored."""
        items = [{"item": [{"category": ""}]}, {"item": [{"category": None}]}]
        assert elevate_category(items) == []

    def test_no_items(self) -> None:
        """Test elevation over an empty feed."""
        assert elevate_category([]) == []


class TestFormatHelpers:
    """Tests for small formatting helpers."""

    def test_format_image_tag_order(self) -> None:
        """Test that the image record carries url, link, title in order."""
        assert format_image_tag("u", "l", "t") == {
            "image": [{"url": "u"}, {"link": "l"}, {"title": "t"}]
        }

    def test_format_build_date(self, fixed_now: datetime) -> None:
        """Test RFC 822 formatting with offset."""
        assert format_build_date(fixed_now) == "Tue, 05 Mar 2024 14:07:09 -0500"

    def test_format_build_date_naive(self) -> None:
        """Test that naive datetimes are treated as local time."""
        formatted = format_build_date(datetime(2024, 3, 5, 14, 7, 9))
        assert formatted.startswith("Tue, 05 Mar 2024 14:07:09 ")
        assert formatted[-5] in "+-"


class TestAssembleChannel:
    """Tests for assemble_channel."""

    def test_metadata_order(self, meta: Meta, fixed_now: datetime) -> None:
        """Test the order of the site metadata records."""
        channel = assemble_channel(meta, [], now=fixed_now)

        assert keys(channel) == [
            "title",
            "description",
            "link",
            "lastBuildDate",
            "docs",
            "copyright",
            "generator",
        ]

    def test_required_values_round_trip(self, meta: Meta, fixed_now: datetime) -> None:
        """Test that title, description and link equal the inputs."""
        channel = assemble_channel(meta, [], now=fixed_now)

        assert channel[:3] == [{"title": "Show"}, {"description": "D"}, {"link": "http://x"}]

    def test_defaults(self, meta: Meta, fixed_now: datetime) -> None:
        """Test docs, copyright and generator defaults."""
        channel = assemble_channel(meta, [], now=fixed_now)

        assert value_of(channel, "lastBuildDate") == "Tue, 05 Mar 2024 14:07:09 -0500"
        assert value_of(channel, "docs") == DOCS_URL
        assert value_of(channel, "copyright") == 2024
        assert value_of(channel, "generator") == GENERATOR_MESSAGE

    def test_default_build_time_is_now(self, meta: Meta) -> None:
        """Test that copyright falls back to the current year."""
        channel = assemble_channel(meta, [])
        assert value_of(channel, "copyright") == datetime.now().year

    def test_provided_values(self, fixed_now: datetime) -> None:
        """Test that provided docs, copyright and generator are used."""
        meta = Meta(
            title="t",
            description="d",
            link="l",
            docs="http://docs",
            copyright="ACME",
            generator="gen",
        )
        channel = assemble_channel(meta, [], now=fixed_now)

        assert value_of(channel, "docs") == "http://docs"
        assert value_of(channel, "copyright") == "ACME"
        assert value_of(channel, "generator") == "gen"

    @pytest.mark.parametrize("missing", ["title", "description", "link"])
    def test_missing_required_field_raises(self, meta_dict: dict, missing: str) -> None:
        """Test that each required field is enforced."""
        meta_dict.pop(missing)

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            assemble_channel(Meta(**meta_dict), [])

        assert str(exc_info.value) == REQUIRED_FIELDS_MESSAGE
        assert exc_info.value.fields == [missing]

    def test_empty_required_field_raises(self, meta_dict: dict) -> None:
        """Test that empty strings count as missing."""
        meta_dict["title"] = ""
        with pytest.raises(MissingRequiredFieldError):
            assemble_channel(Meta(**meta_dict), [])

    def test_opt_appended_verbatim(self, meta_dict: dict, fixed_now: datetime) -> None:
        """Test that opt records follow generator in order."""
        meta_dict["opt"] = [{"language": "en-us"}, {"ttl": 60}]
        channel = assemble_channel(Meta(**meta_dict), [], now=fixed_now)

        assert channel[7:] == [{"language": "en-us"}, {"ttl": 60}]

    def test_image_record(self, meta_dict: dict, fixed_now: datetime) -> None:
        """Test that the image record uses link and title from Meta."""
        meta_dict["image"] = {"url": "http://x/cover.png"}
        channel = assemble_channel(Meta(**meta_dict), [], now=fixed_now)

        assert channel[-1] == {
            "image": [{"url": "http://x/cover.png"}, {"link": "http://x"}, {"title": "Show"}]
        }

    def test_no_image_record_without_image(self, meta: Meta, fixed_now: datetime) -> None:
        """Test that no image record is emitted by default."""
        assert "image" not in keys(assemble_channel(meta, [], now=fixed_now))

    def test_items_follow_metadata(self, meta: Meta, fixed_now: datetime) -> None:
        """Test full ordering: metadata, image, category, then items."""
        meta = meta.model_copy(update={"image": ChannelImage(url="u")})
        items = [
            {"item": [{"title": "Ep1"}, {"category": "News"}]},
            {"item": [{"title": "Ep2"}, {"category": "Tech"}]},
        ]
        channel = assemble_channel(meta, items, now=fixed_now)

        assert keys(channel)[7:] == ["image", "category", "item", "item"]
        assert value_of(channel, "category") == "News,Tech"
        assert channel[-2:] == items

    def test_category_disabled_by_meta(self, meta_dict: dict, fixed_now: datetime) -> None:
        """Test elevateChannelCategories=false."""
        meta_dict["elevateChannelCategories"] = False
        items = [{"item": [{"category": "News"}]}]
        channel = assemble_channel(Meta(**meta_dict), items, now=fixed_now)

        assert keys(channel).count("category") == 0

    def test_category_disabled_by_flag(self, meta: Meta, fixed_now: datetime) -> None:
        """Test the elevate_categories configuration flag."""
        items = [{"item": [{"category": "News"}]}]
        channel = assemble_channel(meta, items, elevate_categories=False, now=fixed_now)

        assert "category" not in keys(channel)


class TestItunesTags:
    """Tests for the iTunes block."""

    def test_minimal_block(self, meta: Meta) -> None:
        """Test defaults derived from the channel metadata."""
        assert itunes_tags(meta) == [
            {"itunes:author": "Show"},
            {"itunes:summary": "D"},
            {"itunes:explicit": "no"},
        ]

    def test_full_block(self) -> None:
        """Test every optional iTunes field."""
        meta = Meta(
            title="Show",
            description="D",
            link="http://x",
            author="Host",
            subtitle="Sub",
            explicit=True,
            itunesCategory="Technology",
            ownerName="Owner",
            ownerEmail="owner@example.com",
            image={"url": "http://x/cover.png"},
        )

        assert itunes_tags(meta) == [
            {"itunes:author": "Host"},
            {"itunes:subtitle": "Sub"},
            {"itunes:summary": "D"},
            {"itunes:explicit": "yes"},
            {"itunes:image": [{"_attr": {"href": "http://x/cover.png"}}]},
            {"itunes:category": [{"_attr": {"text": "Technology"}}]},
            {"itunes:owner": [{"itunes:name": "Owner"}, {"itunes:email": "owner@example.com"}]},
        ]

    def test_block_position(self, meta: Meta, fixed_now: datetime) -> None:
        """Test that the iTunes block sits between opt and image."""
        meta = meta.model_copy(
            update={"opt": [{"language": "en"}], "image": ChannelImage(url="u")}
        )
        channel = assemble_channel(meta, [], include_itunes_tags=True, now=fixed_now)

        assert keys(channel)[7:] == [
            "language",
            "itunes:author",
            "itunes:summary",
            "itunes:explicit",
            "itunes:image",
            "image",
        ]

    def test_block_absent_by_default(self, meta: Meta, fixed_now: datetime) -> None:
        """Test that no iTunes tags are emitted unless enabled."""
        channel = assemble_channel(meta, [], now=fixed_now)
        assert not any(k.startswith("itunes:") for k in keys(channel))

    def test_empty_image_url_skips_itunes_image(self, meta: Meta) -> None:
        """Test that an image without a url emits no itunes:image."""
        meta = meta.model_copy(update={"image": ChannelImage(url="")})

        assert "itunes:image" not in keys(itunes_tags(meta))
