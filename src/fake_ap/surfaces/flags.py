"""Surfaces – flags shown by ``AP.flag.create``."""
from __future__ import annotations

import itertools
from typing import Any

from fake_ap.events import EventBus
from fake_ap.observability.logging import get_logger

logger = get_logger(__name__)

FLAGS_CONTAINER_ID = "ap_flags"


class Flag:
    """Handle returned to the add-on; ``close()`` dismisses it."""

    def __init__(
        self,
        surface: FlagsSurface,
        flag_id: str,
        *,
        title: str = "",
        body: str = "",
        type: str = "info",  # noqa: A002
        close_mode: str = "manual",
        actions: dict[str, str] | None = None,
    ) -> None:
        self._surface = surface
        self.id = flag_id
        self.title = title
        self.body = body
        self.type = type
        self.close_mode = close_mode
        self.actions: dict[str, str] = dict(actions or {})

    @property
    def is_open(self) -> bool:
        return self._surface.get(self.id) is self

    def close(self) -> None:
        self._surface.close(self.id)

    def __repr__(self) -> str:
        return f"Flag(id={self.id!r}, title={self.title!r}, open={self.is_open})"


class FlagsSurface:
    """Open flags, in creation order.

    Closing a flag emits ``flag.close`` and triggering one of its actions
    emits ``flag.action`` on the shared event bus.
    """

    def __init__(self, events: EventBus) -> None:
        self._events = events
        self._flags: dict[str, Flag] = {}
        self._ids = itertools.count(1)

    def create(self, options: dict[str, Any] | None = None) -> Flag:
        options = dict(options or {})
        flag_id = options.get("id") or f"flag-{next(self._ids)}"
        flag = Flag(
            self,
            flag_id,
            title=options.get("title", ""),
            body=options.get("body", ""),
            type=options.get("type", "info"),
            close_mode=options.get("close", "manual"),
            actions=options.get("actions"),
        )
        self._flags[flag_id] = flag
        logger.debug("flag.created", flag_id=flag_id, type=flag.type)
        return flag

    def close(self, flag_id: str) -> None:
        if self._flags.pop(flag_id, None) is None:
            return
        self._events.emit("flag.close", {"flagIdentifier": flag_id})

    def trigger_action(self, flag_id: str, action_id: str) -> None:
        if flag_id not in self._flags:
            return
        self._events.emit(
            "flag.action",
            {"flagIdentifier": flag_id, "actionIdentifier": action_id},
        )

    def get(self, flag_id: str) -> Flag | None:
        return self._flags.get(flag_id)

    @property
    def open_flags(self) -> list[Flag]:
        return list(self._flags.values())

    def clear(self) -> None:
        self._flags.clear()


__all__ = ["FLAGS_CONTAINER_ID", "Flag", "FlagsSurface"]
