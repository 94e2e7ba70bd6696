"""Unit tests for ``context.getToken`` token issuance."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from fake_ap.config import ConfigurationStore, MissingConfigurationError
from fake_ap.context import GET_TOKEN_PATH, TokenIssuer
from fake_ap.kernel.time import FrozenClock
from fake_ap.security.jwt import JwtSigner, TokenValidationError

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
OPTIONS: dict[str, Any] = {"clientKey": "key", "sharedSecret": "secret", "userId": "user"}
SIGNER = JwtSigner()


def _issuer(options: dict[str, Any], clock: FrozenClock | None = None) -> TokenIssuer:
    return TokenIssuer(ConfigurationStore(options), clock or FrozenClock(NOW), SIGNER)


def _without(field: str, **extra: Any) -> dict[str, Any]:
    options = {k: v for k, v in OPTIONS.items() if k != field}
    options.update(extra)
    return options


# ---------------------------------------------------------------------------
# Complete configuration
# ---------------------------------------------------------------------------


class TestGetTokenWithCompleteConfiguration:
    def test_includes_client_key_and_user_id(self) -> None:
        token = asyncio.run(_issuer(OPTIONS).get_token())
        payload = SIGNER.decode(token, None, skip_verify=True)
        assert payload["iss"] == "key"
        assert payload["sub"] == "user"

    def test_is_valid_for_five_minutes(self) -> None:
        token = asyncio.run(_issuer(OPTIONS).get_token())
        payload = SIGNER.decode(token, None, skip_verify=True)
        assert payload["iat"] == int(NOW.timestamp())
        assert payload["exp"] == int(NOW.timestamp()) + 300

    def test_is_signed_with_shared_secret(self) -> None:
        token = asyncio.run(_issuer(OPTIONS).get_token())
        SIGNER.decode(token, "secret")
        with pytest.raises(TokenValidationError):
            SIGNER.decode(token, "other-secret")

    def test_reads_clock_once(self) -> None:
        clock = Mock()
        clock.timestamp.side_effect = [NOW.timestamp(), NOW.timestamp() + 10]
        issuer = TokenIssuer(ConfigurationStore(OPTIONS), clock, SIGNER)
        payload = SIGNER.decode(asyncio.run(issuer.get_token()), "secret")
        assert payload["exp"] - payload["iat"] == 300
        assert clock.timestamp.call_count == 1

    def test_follows_clock(self) -> None:
        clock = FrozenClock(NOW)
        issuer = _issuer(OPTIONS, clock)
        clock.advance(minutes=10)
        payload = SIGNER.decode(asyncio.run(issuer.get_token()), "secret")
        assert payload["iat"] == int(NOW.timestamp()) + 600

    def test_sees_configuration_replacement(self) -> None:
        config = ConfigurationStore(OPTIONS)
        issuer = TokenIssuer(config, FrozenClock(NOW), SIGNER)
        config.configure({**OPTIONS, "userId": "someone-else"})
        payload = SIGNER.decode(asyncio.run(issuer.get_token()), "secret")
        assert payload["sub"] == "someone-else"


# ---------------------------------------------------------------------------
# Missing configuration
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("field", ["clientKey", "sharedSecret", "userId"])
class TestGetTokenWithMissingConfiguration:
    def test_raises_without_hook(self, field: str) -> None:
        with pytest.raises(MissingConfigurationError) as exc_info:
            asyncio.run(_issuer(_without(field)).get_token())
        assert exc_info.value.message == f"Missing configuration for AP.context.getToken: {field}"
        assert exc_info.value.field_name == field

    def test_calls_hook(self, field: str) -> None:
        hook = Mock(return_value="result")
        asyncio.run(_issuer(_without(field, missingConfigurationAction=hook)).get_token())
        hook.assert_called_once_with(GET_TOKEN_PATH, field)

    def test_returns_hook_result(self, field: str) -> None:
        hook = Mock(return_value="result")
        result = asyncio.run(_issuer(_without(field, missingConfigurationAction=hook)).get_token())
        assert result == "result"

    def test_returns_falsy_hook_result(self, field: str) -> None:
        hook = Mock(return_value=0)
        result = asyncio.run(_issuer(_without(field, missingConfigurationAction=hook)).get_token())
        assert result == 0

    def test_awaits_async_hook(self, field: str) -> None:
        hook = AsyncMock(return_value="async-result")
        result = asyncio.run(_issuer(_without(field, missingConfigurationAction=hook)).get_token())
        assert result == "async-result"
        hook.assert_awaited_once_with("AP.context.getToken", field)


class TestMissingConfigurationOrder:
    def test_client_key_checked_first(self) -> None:
        hook = Mock(return_value=None)
        asyncio.run(_issuer({"missingConfigurationAction": hook}).get_token())
        hook.assert_called_once_with("AP.context.getToken", "clientKey")

    def test_shared_secret_before_user_id(self) -> None:
        with pytest.raises(MissingConfigurationError) as exc_info:
            asyncio.run(_issuer({"clientKey": "key"}).get_token())
        assert exc_info.value.field_name == "sharedSecret"

    def test_empty_value_counts_as_missing(self) -> None:
        with pytest.raises(MissingConfigurationError) as exc_info:
            asyncio.run(_issuer({**OPTIONS, "userId": ""}).get_token())
        assert exc_info.value.field_name == "userId"
