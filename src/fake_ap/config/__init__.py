"""Config – option store, environment settings, and configuration errors."""

from fake_ap.config.settings import DotenvSettingsLoader, EnvSettingsLoader, FakeAPSettings, SettingsLoader
from fake_ap.config.store import ConfigurationStore
from fake_ap.config.validation import ConfigError, MissingConfigurationError

__all__ = [
    "ConfigError",
    "ConfigurationStore",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FakeAPSettings",
    "MissingConfigurationError",
    "SettingsLoader",
]
