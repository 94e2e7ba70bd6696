"""Unit tests for the PyJWT-backed signer."""
import pytest

from fake_ap.security.jwt import JwtSigner, TokenValidationError

SECRET = "test-secret-key"
SIGNER = JwtSigner()
CLAIMS = {"iss": "key", "sub": "user", "iat": 1_000, "exp": 1_300}


class TestJwtSigner:
    def test_sign_returns_compact_token(self):
        token = SIGNER.sign(CLAIMS, SECRET)
        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_decode_with_secret(self):
        token = SIGNER.sign(CLAIMS, SECRET)
        assert SIGNER.decode(token, SECRET) == CLAIMS

    def test_expired_claims_still_decode(self):
        # exp in 1970: lifetime is informational only
        token = SIGNER.sign(CLAIMS, SECRET)
        assert SIGNER.decode(token, SECRET)["exp"] == 1_300

    def test_decode_without_verification(self):
        token = SIGNER.sign(CLAIMS, SECRET)
        assert SIGNER.decode(token, None, skip_verify=True) == CLAIMS
        assert SIGNER.decode(token, "wrong-secret", skip_verify=True) == CLAIMS

    def test_wrong_secret_raises(self):
        token = SIGNER.sign(CLAIMS, SECRET)
        with pytest.raises(TokenValidationError):
            SIGNER.decode(token, "wrong-secret")

    def test_malformed_token_raises(self):
        with pytest.raises(TokenValidationError):
            SIGNER.decode("not.a.jwt", SECRET)

    def test_sign_does_not_mutate_claims(self):
        claims = dict(CLAIMS)
        SIGNER.sign(claims, SECRET)
        assert claims == CLAIMS
