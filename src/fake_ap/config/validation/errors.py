"""Config validation errors."""
from __future__ import annotations

from fake_ap.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingConfigurationError(ConfigError):
    """A bridge call needs a configuration option that is absent.

    ``message`` holds the plain text, e.g. ``Missing configuration for
    AP.context.getToken: clientKey``; ``str()`` renders the JSON form of
    ``to_dict()`` like every ``BaseError``.
    """
    default_code = "missing_configuration"

    def __init__(self, caller_path: str, field_name: str) -> None:
        super().__init__(
            f"Missing configuration for {caller_path}: {field_name}",
            detail={"caller_path": caller_path, "field_name": field_name},
        )
        self.caller_path = caller_path
        self.field_name = field_name


__all__ = ["ConfigError", "MissingConfigurationError"]
