# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase access token.

    Only what the token itself carries; productions are owned by `id`.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str | None = None
