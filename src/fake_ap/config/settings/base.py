"""Config settings – FakeAPSettings."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

#: Settings field -> configuration option name understood by ``FakeAP``.
OPTION_NAMES: dict[str, str] = {
    "client_key": "clientKey",
    "shared_secret": "sharedSecret",
    "user_id": "userId",
    "locale": "locale",
}


@dataclasses.dataclass
class FakeAPSettings:
    """Identity and locale options read from ``FAKE_AP_*`` variables."""

    _prefix: ClassVar[str] = "FAKE_AP"

    client_key: str | None = None
    shared_secret: str | None = None
    user_id: str | None = None
    locale: str | None = None

    def to_options(self) -> dict[str, Any]:
        """Return the set fields keyed by their configuration option name."""
        return {
            option: getattr(self, name)
            for name, option in OPTION_NAMES.items()
            if getattr(self, name) is not None
        }


__all__ = ["FakeAPSettings", "OPTION_NAMES"]
