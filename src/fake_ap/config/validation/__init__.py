"""Config validation errors."""
from fake_ap.config.validation.errors import ConfigError, MissingConfigurationError

__all__ = ["ConfigError", "MissingConfigurationError"]
