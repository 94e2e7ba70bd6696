from __future__ import annotations

from typing import Any

import jwt as pyjwt

__all__ = [
    "JwtSigner",
    "TokenValidationError",
]


class TokenValidationError(Exception):
    """Raised when a token cannot be decoded or its signature does not match."""


class JwtSigner:
    """Signs and decodes compact HS256 tokens using PyJWT.

    Lifetime claims are not enforced on decode: ``exp`` is informational for
    the add-on under test and tokens are often minted from a frozen clock.
    """

    def __init__(self, algorithm: str = "HS256") -> None:
        self._algorithm = algorithm

    def sign(self, claims: dict[str, Any], secret: str | bytes) -> str:
        return pyjwt.encode(dict(claims), secret, algorithm=self._algorithm)

    def decode(
        self,
        token: str,
        secret: str | bytes | None = None,
        skip_verify: bool = False,
    ) -> dict[str, Any]:
        if skip_verify or secret is None:
            options: dict[str, Any] = {"verify_signature": False}
            key: str | bytes = ""
        else:
            options = {"verify_exp": False, "verify_iat": False, "verify_nbf": False}
            key = secret
        try:
            return pyjwt.decode(
                token,
                key,
                algorithms=[self._algorithm],
                options=options,
            )
        except pyjwt.InvalidSignatureError as exc:
            raise TokenValidationError("Token signature does not match") from exc
        except pyjwt.PyJWTError as exc:
            raise TokenValidationError(str(exc)) from exc
