"""Security – token signing (PyJWT-backed)."""
from fake_ap.security.jwt.signer import JwtSigner, TokenValidationError

__all__ = ["JwtSigner", "TokenValidationError"]
