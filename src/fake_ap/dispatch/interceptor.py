"""Dispatch – resolves any dotted path on the fake API.

Modeled paths go to their registered handler. Everything else is *not
implemented*: the ``notImplementedAction`` hook, when configured, receives
``("AP.<path>", *args)`` and its result is returned; otherwise the call
resolves to ``None``.
"""

from __future__ import annotations

from typing import Any

from fake_ap.config.store import NOT_IMPLEMENTED_ACTION, ConfigurationStore
from fake_ap.dispatch.table import DispatchTable, Route, RouteKind
from fake_ap.kernel.hooks import invoke_hook
from fake_ap.observability.logging import get_logger

logger = get_logger(__name__)

ROOT = "AP"


class Interceptor:
    def __init__(self, table: DispatchTable, config: ConfigurationStore) -> None:
        self.table = table
        self._config = config

    def dispatch(self, path: str, *args: Any) -> Any:
        """Invoke *path* with its natural calling convention.

        ``SYNC`` routes return their value and cannot be awaited; ``ASYNC``
        routes and the not-implemented fallback return a coroutine. Use
        :meth:`call` (or ``FakeAP.call``) to await any path uniformly.
        """
        route = self.table.resolve(path)
        if route is None:
            return self.not_implemented(path, *args)
        return route.handler(*args)

    async def call(self, path: str, *args: Any) -> Any:
        """Invoke *path* and await the outcome, whatever the route kind."""
        route = self.table.resolve(path)
        if route is None:
            return await self.not_implemented(path, *args)
        if route.kind is RouteKind.ASYNC:
            return await route.handler(*args)
        return route.handler(*args)

    async def not_implemented(self, path: str, *args: Any) -> Any:
        full_path = f"{ROOT}.{path}"
        hook = self._config.get(NOT_IMPLEMENTED_ACTION)
        logger.debug("dispatch.not_implemented", path=full_path, hooked=hook is not None)
        if hook is None:
            return None
        return await invoke_hook(hook, full_path, *args)

    def is_modeled(self, path: str) -> bool:
        return path in self.table

    def resolve(self, path: str) -> Route | None:
        return self.table.resolve(path)


class ApiPath:
    """Callable proxy for one dotted path; attribute access extends the path.

    ``ApiPath(interceptor, "jira").refreshIssuePage`` is the proxy for
    ``jira.refreshIssuePage``, so any path can be reached and called.

    Calling a proxy keeps the route's convention: modeled synchronous
    methods such as ``ap.events.on(...)`` return plain values, so
    ``await ap.events.on(...)`` is a ``TypeError``. Await any path through
    ``FakeAP.call("events.on", ...)`` instead.
    """

    __slots__ = ("_interceptor", "_path")

    def __init__(self, interceptor: Interceptor, path: str) -> None:
        self._interceptor = interceptor
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def __getattr__(self, name: str) -> ApiPath:
        if name.startswith("__"):
            raise AttributeError(name)
        return ApiPath(self._interceptor, f"{self._path}.{name}")

    def __call__(self, *args: Any) -> Any:
        return self._interceptor.dispatch(self._path, *args)

    def __repr__(self) -> str:
        return f"<ApiPath {ROOT}.{self._path}>"


__all__ = ["ApiPath", "Interceptor", "ROOT"]
