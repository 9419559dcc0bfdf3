# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Verifies Supabase access tokens sent as "Authorization: Bearer <jwt>".
#
# Supports both:
# - ES256 (Supabase JWT signing keys) via the project's JWKS endpoint
# - HS256 (legacy Supabase JWT secret)
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
import time
from typing import Any
from uuid import UUID

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.auth.models import AuthUser
from app.config import settings

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor
security = HTTPBearer()

AUDIENCE = "authenticated"
JWKS_CACHE_TTL = 3600  # 1 hour


class _JWKSCache:
    """Signing keys fetched from Supabase, refreshed hourly."""

    def __init__(self) -> None:
        self.keys: list[dict[str, Any]] = []
        self.fetched_at: float = 0

    @property
    def url(self) -> str:
        return f"{settings.SUPABASE_URL.rstrip('/')}/auth/v1/.well-known/jwks.json"

    def get(self) -> list[dict[str, Any]]:
        if self.keys and (time.time() - self.fetched_at) < JWKS_CACHE_TTL:
            return self.keys

        try:
            response = httpx.get(self.url, timeout=10)
            response.raise_for_status()
            self.keys = response.json().get("keys", [])
            self.fetched_at = time.time()
            logger.debug(f"Fetched {len(self.keys)} signing keys from {self.url}")
        except httpx.HTTPError as e:
            # Stale keys are better than none while Supabase is unreachable
            logger.warning(f"Failed to fetch JWKS: {e}")

        return self.keys


_jwks = _JWKSCache()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _signing_key(token: str) -> tuple[Any, str]:
    """
    Pick the verification key for a token from its header.

    Returns:
        (key, algorithm)

    Raises:
        HTTPException: 401 if the token needs the JWT secret and none is set
    """
    header = jwt.get_unverified_header(token)
    alg = header.get("alg", "HS256")
    kid = header.get("kid")

    if alg != "HS256" and kid:
        for key in _jwks.get():
            if key.get("kid") == kid:
                return key, alg
        logger.warning(f"No signing key for alg={alg}, kid={kid}; trying the JWT secret")

    if not settings.SUPABASE_JWT_SECRET:
        # An empty HMAC key would verify tokens signed by anyone
        logger.warning("SUPABASE_JWT_SECRET is not set; rejecting HS256 token")
        raise _unauthorized("Invalid token: no signing key available")

    return settings.SUPABASE_JWT_SECRET, "HS256"


def decode_access_token(token: str) -> AuthUser:
    """
    Verify a Supabase access token and return its user.

    Raises:
        HTTPException: 401 if the token is invalid, expired or has no
            usable user id
    """
    try:
        key, algorithm = _signing_key(token)
        payload = jwt.decode(token, key, algorithms=[algorithm], audience=AUDIENCE)
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise _unauthorized(f"Invalid token: {e}")

    subject = payload.get("sub")
    if not subject:
        logger.warning("JWT token missing 'sub' claim")
        raise _unauthorized("Invalid token: missing user ID")

    try:
        user_id = UUID(subject)
    except ValueError:
        logger.warning(f"Invalid UUID in token: {subject}")
        raise _unauthorized("Invalid token: malformed user ID")

    logger.debug(f"Authenticated user: {user_id}")
    return AuthUser(id=user_id, email=payload.get("email"))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthUser:
    """
    Extract and validate the user from the bearer token.

    Returns:
        AuthUser: The authenticated user

    Raises:
        HTTPException: 401 if token is invalid or expired (403 from
            HTTPBearer if the header is missing)
    """
    return decode_access_token(credentials.credentials)
