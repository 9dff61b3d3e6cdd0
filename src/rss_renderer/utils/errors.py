"""Custom exceptions for the RSS renderer."""


class RendererError(Exception):
    """Base exception for all renderer errors."""

    pass


class ConfigError(RendererError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class RenderError(RendererError):
    """Errors raised while turning a payload into an RSS document."""

    pass


class MissingRequiredFieldError(RenderError):
    """A required channel field (title, description or link) is missing."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class EmptyPipelineResultError(RenderError):
    """The render pipeline produced no document."""

    pass


class UpstreamDataError(RenderError):
    """Feed entries are not shaped the way the renderer expects."""

    pass
