"""Surfaces – dialogs opened by ``AP.dialog.create``."""
from __future__ import annotations

import itertools
from typing import Any, Callable

from fake_ap.events import EventBus
from fake_ap.observability.logging import get_logger

logger = get_logger(__name__)

DIALOGS_CONTAINER_ID = "ap_dialogs"


class Dialog:
    def __init__(self, key: str, options: dict[str, Any]) -> None:
        self.key = key
        self.options = options
        self.custom_data: Any = options.get("customData")
        self._close_listeners: list[Callable[..., Any]] = []

    def on(self, event: str, listener: Callable[..., Any]) -> None:
        """Register a ``close`` listener; other dialog events are never fired."""
        if event == "close":
            self._close_listeners.append(listener)

    def _closed(self, data: Any) -> None:
        for listener in list(self._close_listeners):
            listener(data)

    def __repr__(self) -> str:
        return f"Dialog(key={self.key!r})"


class DialogsSurface:
    """Stack of open dialogs; the last one created is active."""

    def __init__(self, events: EventBus) -> None:
        self._events = events
        self._stack: list[Dialog] = []
        self._keys = itertools.count(1)

    def create(self, options: dict[str, Any] | None = None) -> Dialog:
        options = dict(options or {})
        dialog = Dialog(options.get("key") or f"dialog-{next(self._keys)}", options)
        self._stack.append(dialog)
        logger.debug("dialog.created", key=dialog.key, depth=len(self._stack))
        return dialog

    def close(self, data: Any = None) -> None:
        """Close the active dialog, handing *data* to its listeners and ``dialog.close``."""
        if not self._stack:
            return
        dialog = self._stack.pop()
        dialog._closed(data)
        self._events.emit("dialog.close", data)

    def get_custom_data(self, callback: Callable[[Any], Any]) -> None:
        callback(self.active.custom_data if self.active is not None else None)

    @property
    def active(self) -> Dialog | None:
        return self._stack[-1] if self._stack else None

    @property
    def open_dialogs(self) -> list[Dialog]:
        return list(self._stack)

    def clear(self) -> None:
        self._stack.clear()


__all__ = ["DIALOGS_CONTAINER_ID", "Dialog", "DialogsSurface"]
