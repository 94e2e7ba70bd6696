"""FakeAP – the emulated host-bridge object handed to add-on code.

Example::

    ap = FakeAP({"clientKey": "key", "sharedSecret": "secret", "userId": "user"})
    token = await ap.context.getToken()
    ap.events.on("issue.changed", listener)
    await ap.jira.refreshIssuePage()        # unmodeled: notImplementedAction or None
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fake_ap.config import ConfigurationStore, EnvSettingsLoader, FakeAPSettings, SettingsLoader
from fake_ap.context import TokenIssuer
from fake_ap.dispatch import ApiPath, DispatchTable, Interceptor, RouteKind
from fake_ap.events import EventBus
from fake_ap.history import HistorySimulator
from fake_ap.kernel.time import Clock, SystemClock
from fake_ap.mount import MountRegistry, get_mount_registry
from fake_ap.observability.logging import get_logger
from fake_ap.security.jwt import JwtSigner
from fake_ap.surfaces import DIALOGS_CONTAINER_ID, FLAGS_CONTAINER_ID, DialogsSurface, FlagsSurface
from fake_ap.user import LocaleResolver

logger = get_logger(__name__)


class FakeAP:
    """Stand-in for the host's ``AP`` object.

    Any attribute path not defined on this class is a callable host method:
    modeled ones are answered by the components below, the rest fall back to
    the ``notImplementedAction`` hook.

    Args:
        options: Initial configuration (``clientKey``, ``sharedSecret``,
            ``userId``, ``locale``, ``missingConfigurationAction``,
            ``notImplementedAction``).
        config: Store to share with other instances; created when omitted.
        clock: Time source for token claims; the system clock by default.
        signer: Token signer; HS256 via PyJWT by default.
        mount_registry: Where the flags and dialogs surfaces are mounted;
            the process-wide registry by default.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        config: ConfigurationStore | None = None,
        clock: Clock | None = None,
        signer: JwtSigner | None = None,
        mount_registry: MountRegistry | None = None,
    ) -> None:
        self.config = config if config is not None else ConfigurationStore()
        if options is not None:
            self.config.configure(options)
        self.clock = clock or SystemClock()
        self.mount_registry = mount_registry or get_mount_registry()

        self.event_bus = EventBus()
        self.history_simulator = HistorySimulator(self.mount_registry.document.location)
        self.token_issuer = TokenIssuer(self.config, self.clock, signer or JwtSigner())
        self.locale_resolver = LocaleResolver(self.config)
        self.flags = FlagsSurface(self.event_bus)
        self.dialogs = DialogsSurface(self.event_bus)
        self.interceptor = Interceptor(self._build_routes(), self.config)

        self.mount_registry.mount_when_ready(self.flags, FLAGS_CONTAINER_ID)
        self.mount_registry.mount_when_ready(self.dialogs, DIALOGS_CONTAINER_ID)
        logger.debug("fake_ap.created", routes=len(self.interceptor.table))

    def _build_routes(self) -> DispatchTable:
        table = DispatchTable()
        table.register("context.getToken", self.token_issuer.get_token, RouteKind.ASYNC)

        table.register("events.on", self.event_bus.on)
        table.register("events.once", self.event_bus.once)
        table.register("events.off", self.event_bus.off)
        table.register("events.emit", self.event_bus.emit)

        table.register("history.getState", self.history_simulator.get_state)
        table.register("history.pushState", self.history_simulator.push_state)
        table.register("history.popState", self.history_simulator.pop_state)
        table.register("history._clearHistory", self.history_simulator.clear_history)

        table.register("user.getLocale", self.locale_resolver.get_locale)

        table.register("flag.create", self.flags.create)
        table.register("dialog.create", self.dialogs.create)
        table.register("dialog.close", self.dialogs.close)
        table.register("dialog.getCustomData", self.dialogs.get_custom_data)
        return table

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configure(self, options: Mapping[str, Any] | None = None, **overrides: Any) -> None:
        """Replace the whole configuration; calling with nothing resets it."""
        self.config.configure(options, **overrides)

    def reset_configuration(self) -> None:
        self.config.reset()

    def configure_from_env(self, loader: SettingsLoader | None = None) -> FakeAPSettings:
        """Configure identity and locale from ``FAKE_AP_*`` variables."""
        settings = (loader or EnvSettingsLoader()).load(FakeAPSettings)
        self.config.configure(settings.to_options())
        return settings

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def call(self, path: str, *args: Any) -> Any:
        """Call the host method at dotted *path* and await its result.

        This is the awaitable entry point for every path. Attribute proxies
        such as ``ap.events.on`` return plain values for synchronous methods.
        """
        return await self.interceptor.call(path, *args)

    def reset(self) -> None:
        """Return every component to its initial state (between tests)."""
        self.config.reset()
        self.event_bus.clear()
        self.history_simulator.clear_history()
        self.flags.clear()
        self.dialogs.clear()

    def __getattr__(self, name: str) -> ApiPath:
        interceptor = self.__dict__.get("interceptor")
        if name.startswith("__") or interceptor is None:
            raise AttributeError(name)
        return ApiPath(interceptor, name)

    def __repr__(self) -> str:
        return f"FakeAP(config={self.config!r})"


__all__ = ["FakeAP"]
