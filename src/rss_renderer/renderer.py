"""Render orchestration: payload in, RSS (or a JSON error) out.

The pipeline runs in a single pass:

1. hoist the channel image from the first feed entry
2. wrap every entry as an ``item``
3. assemble channel metadata around the items
4. wrap everything in the ``rss``/``channel`` envelope
5. serialize to XML and write the response

Any failure is caught once, at :func:`render`, and turned into a 500 JSON
response by :func:`send_error`. Nothing is written to the response before
the document has been fully serialized.
"""

import logging
import traceback
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from rss_renderer.config.schema import RendererConfig
from rss_renderer.feed.envelope import wrap_in_top_level
from rss_renderer.feed.metadata import assemble_channel
from rss_renderer.feed.models import FeedPayload
from rss_renderer.feed.normalize import hoist_image, normalize_feed
from rss_renderer.feed.serializer import to_xml
from rss_renderer.response import ResponseWriter
from rss_renderer.utils.errors import EmptyPipelineResultError

logger = logging.getLogger(__name__)

LogFunc = Callable[[str, str, dict[str, Any]], None]

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _default_log(level: str, message: str, context: dict[str, Any]) -> None:
    logger.log(_LEVELS.get(level, logging.INFO), message, extra=context)


log: LogFunc = _default_log


def set_log(fake: LogFunc | None) -> None:
    """Replace the module log function (``None`` restores the default)."""
    global log
    log = fake or _default_log


def send_error(response: ResponseWriter, error: BaseException) -> None:
    """Write a 500 JSON error response and log the failure."""
    status = 500
    message = str(error)
    response.set_status(status)
    response.send_json({"status": status, "message": message})

    stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    log("error", message, {"stack": stack})


def build_document(
    payload: FeedPayload | Mapping[str, Any],
    config: RendererConfig | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the RSS document tree for a payload.

    Args:
        payload: ``{feed, meta, attr}`` as a FeedPayload or plain mapping
        config: Renderer configuration (defaults apply when None)
        now: Build time for ``lastBuildDate``; defaults to now

    Returns:
        Document tree rooted at ``rss``

    Raises:
        pydantic.ValidationError: If the payload has the wrong shape
        MissingRequiredFieldError: If title, description or link is missing
        UpstreamDataError: If a feed entry is malformed
    """
    config = config or RendererConfig()
    if not isinstance(payload, FeedPayload):
        payload = FeedPayload.model_validate(payload)

    meta = hoist_image(payload.feed, payload.meta)
    items = normalize_feed(payload.feed)
    logger.debug(f"Rendering {len(items)} item(s) for channel {meta.title!r}")

    channel = assemble_channel(
        meta,
        items,
        include_itunes_tags=config.include_itunes_tags,
        elevate_categories=config.elevate_categories,
        now=now,
    )
    return wrap_in_top_level(
        channel,
        payload.attr,
        include_itunes_tags=config.include_itunes_tags,
    )


def render(
    payload: FeedPayload | Mapping[str, Any],
    info: Any,
    response: ResponseWriter,
    config: RendererConfig | None = None,
) -> None:
    """Render a feed payload to an RSS response.

    Args:
        payload: ``{feed, meta, attr}`` from the content system
        info: Request context; not used by the renderer
        response: Response to write the XML (or the error) to
        config: Renderer configuration (defaults apply when None)
    """
    config = config or RendererConfig()

    try:
        document = build_document(payload, config)
        if not document:
            raise EmptyPipelineResultError("No data sent to XML renderer, cannot respond")

        body = to_xml(document, declaration=True, indent=config.indent)

        response.set_content_type(config.content_type)
        response.send_text(body)
    except Exception as e:
        send_error(response, e)
