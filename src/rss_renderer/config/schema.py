"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class RendererConfig(BaseModel):
    """Global renderer configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"

    # Optional channel blocks
    include_itunes_tags: bool = False
    elevate_categories: bool = True  # Meta.elevateChannelCategories must also be true

    # Output
    content_type: str = "text/rss+xml"
    indent: str = "\t"
