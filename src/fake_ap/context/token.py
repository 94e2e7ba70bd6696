"""Context – session token issuance (``AP.context.getToken``)."""

from __future__ import annotations

from typing import Any

from fake_ap.config.store import (
    CLIENT_KEY,
    MISSING_CONFIGURATION_ACTION,
    SHARED_SECRET,
    USER_ID,
    ConfigurationStore,
)
from fake_ap.config.validation import MissingConfigurationError
from fake_ap.kernel.hooks import invoke_hook
from fake_ap.kernel.time import Clock
from fake_ap.observability.logging import get_logger
from fake_ap.security.jwt import JwtSigner

logger = get_logger(__name__)

GET_TOKEN_PATH = "AP.context.getToken"

#: Seconds between ``iat`` and ``exp``.
TOKEN_LIFETIME_SECONDS = 300

#: Checked in this order; the first missing one decides the outcome.
REQUIRED_FIELDS: tuple[str, ...] = (CLIENT_KEY, SHARED_SECRET, USER_ID)


class TokenIssuer:
    """Builds a signed session token from the configured identity."""

    def __init__(self, config: ConfigurationStore, clock: Clock, signer: JwtSigner) -> None:
        self._config = config
        self._clock = clock
        self._signer = signer

    async def get_token(self) -> Any:
        """Return a signed token, or the ``missingConfigurationAction`` result.

        Raises:
            MissingConfigurationError: an identity field is absent and no
                ``missingConfigurationAction`` is configured.
        """
        for field_name in REQUIRED_FIELDS:
            if self._config.get(field_name):
                continue
            hook = self._config.get(MISSING_CONFIGURATION_ACTION)
            logger.debug(
                "token.missing_configuration",
                field=field_name,
                deferred=hook is not None,
            )
            if hook is None:
                raise MissingConfigurationError(GET_TOKEN_PATH, field_name)
            return await invoke_hook(hook, GET_TOKEN_PATH, field_name)

        return self._signer.sign(self.build_claims(), self._config.get(SHARED_SECRET))

    def build_claims(self) -> dict[str, Any]:
        issued_at = int(self._clock.timestamp())
        return {
            "iss": self._config.get(CLIENT_KEY),
            "sub": self._config.get(USER_ID),
            "iat": issued_at,
            "exp": issued_at + TOKEN_LIFETIME_SECONDS,
        }


__all__ = ["GET_TOKEN_PATH", "REQUIRED_FIELDS", "TOKEN_LIFETIME_SECONDS", "TokenIssuer"]
