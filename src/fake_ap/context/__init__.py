"""Context – the ``AP.context`` namespace."""
from fake_ap.context.token import GET_TOKEN_PATH, TOKEN_LIFETIME_SECONDS, TokenIssuer

__all__ = ["GET_TOKEN_PATH", "TOKEN_LIFETIME_SECONDS", "TokenIssuer"]
