"""User – locale lookup (``AP.user.getLocale``)."""
from __future__ import annotations

from typing import Any, Callable

from fake_ap.config.store import LOCALE, ConfigurationStore

DEFAULT_LOCALE = "en_US"


class LocaleResolver:
    def __init__(self, config: ConfigurationStore) -> None:
        self._config = config

    def get_locale(self, callback: Callable[[str], Any]) -> None:
        callback(self._config.get(LOCALE) or DEFAULT_LOCALE)


__all__ = ["DEFAULT_LOCALE", "LocaleResolver"]
