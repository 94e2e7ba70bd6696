"""Security – signer collaborator used by the token issuer."""
from fake_ap.security.jwt import JwtSigner, TokenValidationError

__all__ = ["JwtSigner", "TokenValidationError"]
