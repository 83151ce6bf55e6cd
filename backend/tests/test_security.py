"""
Clinic Booking API — Token and Password Tests
===============================================

What:  Signing/verification of bearer tokens and bcrypt password checks.
"""

from datetime import timedelta
from unittest.mock import patch

import pytest
from jose import jwt

from app.config import settings
from app.exceptions import AuthenticationError
from app.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestAccessTokens:

    def test_round_trip_carries_identity_claims(self):
        token = create_access_token(subject="reception", user_id="42")

        claims = decode_access_token(token)

        assert claims["sub"] == "reception"
        assert claims["id"] == "42"
        assert claims["iss"] == settings.jwt_issuer
        assert claims["aud"] == settings.jwt_audience
        assert claims["jti"]

    def test_every_token_has_a_unique_id(self):
        first = decode_access_token(create_access_token("reception", "1"))
        second = decode_access_token(create_access_token("reception", "1"))
        assert first["jti"] != second["jti"]

    def test_expired_token_rejected(self):
        token = create_access_token("reception", "1", expires_delta=timedelta(seconds=-5))

        with pytest.raises(AuthenticationError) as exc_info:
            decode_access_token(token)
        assert exc_info.value.message == "Token has expired"

    def test_wrong_audience_rejected(self):
        with patch.object(settings, "jwt_audience", "someone-else"):
            token = create_access_token("reception", "1")

        with pytest.raises(AuthenticationError) as exc_info:
            decode_access_token(token)
        assert exc_info.value.message == "Invalid token"

    def test_wrong_signing_key_rejected(self):
        forged = jwt.encode(
            {"sub": "reception", "iss": settings.jwt_issuer, "aud": settings.jwt_audience},
            "not-the-key",
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError):
            decode_access_token(forged)

    def test_garbage_rejected(self):
        with pytest.raises(AuthenticationError):
            decode_access_token("not.a.token")


class TestPasswords:

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password("s3cret-pass")

        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("wrong", hashed)

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("s3cret-pass", "not-a-bcrypt-hash") is False
