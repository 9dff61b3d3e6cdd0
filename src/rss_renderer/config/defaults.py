"""Default configuration values."""

import yaml

from rss_renderer.config.schema import RendererConfig

DEFAULT_CONFIG = RendererConfig()


def get_default_config_content() -> str:
    """Return the YAML text written to a fresh config.yaml."""
    header = "# rss-renderer configuration\n"
    body = yaml.safe_dump(
        DEFAULT_CONFIG.model_dump(mode="python"),
        default_flow_style=False,
        sort_keys=False,
    )
    return header + body
