"""Configuration store shared by every component of a fake API."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from fake_ap.observability.logging import get_logger

logger = get_logger(__name__)

CLIENT_KEY = "clientKey"
SHARED_SECRET = "sharedSecret"
USER_ID = "userId"
LOCALE = "locale"
MISSING_CONFIGURATION_ACTION = "missingConfigurationAction"
NOT_IMPLEMENTED_ACTION = "notImplementedAction"

RECOGNIZED_OPTIONS = frozenset(
    {
        CLIENT_KEY,
        SHARED_SECRET,
        USER_ID,
        LOCALE,
        MISSING_CONFIGURATION_ACTION,
        NOT_IMPLEMENTED_ACTION,
    }
)


class ConfigurationStore:
    """Holds the active option set.

    ``configure`` never merges: each call defines the complete set seen by
    later reads. Components keep a reference to the store, not to the dict,
    so a replacement is visible everywhere at once.
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._options: dict[str, Any] = dict(options or {})

    def configure(self, options: Mapping[str, Any] | None = None, **overrides: Any) -> None:
        self._options = {**(options or {}), **overrides}
        unrecognized = sorted(set(self._options) - RECOGNIZED_OPTIONS)
        if unrecognized:
            logger.debug("config.unrecognized_options", options=unrecognized)

    def reset(self) -> None:
        self._options = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._options.get(key, default)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._options)

    def __contains__(self, key: object) -> bool:
        return key in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"ConfigurationStore(keys={sorted(self._options)!r})"


__all__ = [
    "CLIENT_KEY",
    "ConfigurationStore",
    "LOCALE",
    "MISSING_CONFIGURATION_ACTION",
    "NOT_IMPLEMENTED_ACTION",
    "RECOGNIZED_OPTIONS",
    "SHARED_SECRET",
    "USER_ID",
]
