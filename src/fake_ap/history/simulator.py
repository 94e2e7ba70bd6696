"""History – fragment-backed navigation state (``AP.history``)."""
from __future__ import annotations

from typing import Any, Callable

from fake_ap.dom import Location
from fake_ap.observability.logging import get_logger

logger = get_logger(__name__)

#: Prefix written before the state in the location fragment.
FRAGMENT_MARKER = "!"


class HistorySimulator:
    def __init__(self, location: Location) -> None:
        self._location = location
        self._state = ""
        self._listeners: list[Callable[[], Any]] = []

    def get_state(self) -> str:
        return self._state

    def push_state(self, value: str) -> None:
        """Set the state, mirror it into the fragment, and notify listeners."""
        self._state = value
        self._location.hash = f"#{FRAGMENT_MARKER}{value}"
        logger.debug("history.push_state", state=value, listeners=len(self._listeners))
        for listener in list(self._listeners):
            listener()

    def pop_state(self, listener: Callable[[], Any]) -> None:
        """Register *listener* to run on every later ``push_state``."""
        self._listeners.append(listener)

    def clear_history(self) -> None:
        """Forget state, fragment, and listeners."""
        self._state = ""
        self._location.hash = ""
        self._listeners = []


__all__ = ["FRAGMENT_MARKER", "HistorySimulator"]
