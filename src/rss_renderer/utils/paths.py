"""Filesystem locations used by the renderer."""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "rss-renderer"


def get_config_dir() -> Path:
    """Return the user configuration directory."""
    return Path(user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Return the path of config.yaml."""
    return get_config_dir() / "config.yaml"
