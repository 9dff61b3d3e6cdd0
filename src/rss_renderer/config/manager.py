"""Configuration manager for loading and saving renderer config."""

from pathlib import Path

import yaml

from rss_renderer.config.defaults import DEFAULT_CONFIG, get_default_config_content
from rss_renderer.config.schema import RendererConfig
from rss_renderer.utils.errors import InvalidConfigError
from rss_renderer.utils.paths import get_config_dir, get_config_file


class ConfigManager:
    """Manages the renderer configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to the
                platform user config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> RendererConfig:
        """Load and validate configuration.

        Returns:
            Validated RendererConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return DEFAULT_CONFIG.model_copy()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return RendererConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: RendererConfig) -> None:
        """Save configuration.

        Args:
            config: RendererConfig instance to save
        """
        data = config.model_dump(mode="python")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
