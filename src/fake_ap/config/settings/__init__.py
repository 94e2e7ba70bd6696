"""Config settings – environment-backed defaults for a fake API."""
from fake_ap.config.settings.base import OPTION_NAMES, FakeAPSettings
from fake_ap.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "FakeAPSettings", "OPTION_NAMES", "SettingsLoader"]
