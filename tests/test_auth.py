# =============================================================================
# tests/test_auth.py - Access Token Verification Tests
# =============================================================================
# Tokens are signed with the HS256 test secret from conftest, so no JWKS
# request is made.
# =============================================================================

import time

import pytest
from fastapi import HTTPException
from jose import jwt

from app.auth import decode_access_token
from tests.conftest import USER_ID

SECRET = "test-jwt-secret"


def _token(secret=SECRET, **claims):
    payload = {
        "sub": str(USER_ID),
        "email": "producer@example.com",
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
    }
    payload.update(claims)
    return jwt.encode({k: v for k, v in payload.items() if v is not None}, secret, algorithm="HS256")


class TestDecodeAccessToken:
    def test_valid_token(self):
        user = decode_access_token(_token())

        assert user.id == USER_ID
        assert user.email == "producer@example.com"

    def test_expired_token(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(_token(exp=int(time.time()) - 60))

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"

    def test_wrong_secret(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(_token(secret="not-the-secret"))

        assert exc_info.value.status_code == 401

    def test_wrong_audience(self):
        with pytest.raises(HTTPException):
            decode_access_token(_token(aud="anon"))

    def test_missing_subject(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(_token(sub=None))

        assert "missing user ID" in exc_info.value.detail

    def test_malformed_subject(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(_token(sub="not-a-uuid"))

        assert "malformed user ID" in exc_info.value.detail

    def test_garbage_token(self):
        with pytest.raises(HTTPException):
            decode_access_token("not.a.jwt")

    def test_hs256_rejected_without_secret(self, monkeypatch):
        """An unset secret must not turn into an empty HMAC key."""
        from app.config import settings

        monkeypatch.setattr(settings, "SUPABASE_JWT_SECRET", "")

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(_token(secret=""))

        assert exc_info.value.status_code == 401
        assert "no signing key" in exc_info.value.detail
