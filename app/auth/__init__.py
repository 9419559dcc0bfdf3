# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# JWT-based authentication using Supabase Auth. Sign-up and login happen
# client-side against Supabase; the API only verifies access tokens.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
# =============================================================================

from app.auth.dependencies import decode_access_token, get_current_user
from app.auth.models import AuthUser

__all__ = [
    "decode_access_token",
    "get_current_user",
    "AuthUser",
]
