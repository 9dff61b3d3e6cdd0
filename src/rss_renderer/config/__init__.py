"""Configuration management for the RSS renderer."""

from rss_renderer.config.manager import ConfigManager
from rss_renderer.config.schema import RendererConfig

__all__ = ["ConfigManager", "RendererConfig"]
