"""Dispatch – routing table from dotted host paths to modeled handlers."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator


class RouteKind(enum.Enum):
    SYNC = "sync"
    """Handler returns its value directly (events, history, ...).

    Not awaitable when called through a path proxy; ``FakeAP.call`` awaits
    every kind.
    """
    ASYNC = "async"
    """Handler is a coroutine function (``context.getToken``)."""


@dataclass(frozen=True)
class Route:
    path: str
    handler: Callable[..., Any]
    kind: RouteKind = RouteKind.SYNC


class DispatchTable:
    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}

    def register(
        self,
        path: str,
        handler: Callable[..., Any],
        kind: RouteKind = RouteKind.SYNC,
    ) -> Route:
        """Bind *path* to *handler*; a later registration replaces an earlier one."""
        route = Route(path, handler, kind)
        self._routes[path] = route
        return route

    def resolve(self, path: str) -> Route | None:
        return self._routes.get(path)

    def paths(self) -> list[str]:
        return sorted(self._routes)

    def __contains__(self, path: object) -> bool:
        return path in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)


__all__ = ["DispatchTable", "Route", "RouteKind"]
