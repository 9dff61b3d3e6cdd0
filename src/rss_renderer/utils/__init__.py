"""Utility functions and helpers for the RSS renderer."""

from rss_renderer.utils.errors import (
    ConfigError,
    EmptyPipelineResultError,
    InvalidConfigError,
    MissingRequiredFieldError,
    RenderError,
    RendererError,
    UpstreamDataError,
)
from rss_renderer.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "RendererError",
    "ConfigError",
    "InvalidConfigError",
    "RenderError",
    "MissingRequiredFieldError",
    "EmptyPipelineResultError",
    "UpstreamDataError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
