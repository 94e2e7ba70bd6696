"""Events – synchronous in-process event bus (``AP.events``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from fake_ap.observability.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[..., Any]

#: Sentinel for ``emit`` called without a payload; listeners then get no argument.
_NO_PAYLOAD: Any = object()


@dataclass(eq=False)
class _Entry:
    listener: Listener
    once: bool = False


class EventBus:
    """Named events with permanent and one-shot listeners.

    Listeners run synchronously in registration order. ``emit`` works on a
    snapshot of the listener list, so listeners added or removed while an
    event is being dispatched only affect later emits.
    """

    def __init__(self) -> None:
        self._registry: dict[str, list[_Entry]] = {}

    def on(self, name: str, listener: Listener) -> None:
        self._registry.setdefault(name, []).append(_Entry(listener))

    def once(self, name: str, listener: Listener) -> None:
        self._registry.setdefault(name, []).append(_Entry(listener, once=True))

    def off(self, name: str, listener: Listener) -> None:
        entries = self._registry.get(name)
        if not entries:
            return
        for index, entry in enumerate(entries):
            if entry.listener is listener:
                del entries[index]
                break
        if not entries:
            del self._registry[name]

    def emit(self, name: str, payload: Any = _NO_PAYLOAD) -> None:
        snapshot = list(self._registry.get(name, ()))
        if not snapshot:
            return
        logger.debug("events.emit", event_name=name, listeners=len(snapshot))
        for entry in snapshot:
            if entry.once:
                self._discard(name, entry)
            if payload is _NO_PAYLOAD:
                entry.listener()
            else:
                entry.listener(payload)

    def listeners(self, name: str) -> list[Listener]:
        """Return the listeners currently registered for *name*."""
        return [entry.listener for entry in self._registry.get(name, ())]

    def clear(self) -> None:
        self._registry.clear()

    def _discard(self, name: str, entry: _Entry) -> None:
        entries = self._registry.get(name)
        if entries is None:
            return
        for index, candidate in enumerate(entries):
            if candidate is entry:
                del entries[index]
                break
        if not entries:
            del self._registry[name]


__all__ = ["EventBus", "Listener"]
