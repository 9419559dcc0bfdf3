# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Every /productions/{production_id}/... route resolves the production
# through get_owned_production, so a production that belongs to another
# user looks exactly like one that doesn't exist (404).
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path

from app.auth import AuthUser, get_current_user
from core.models.production import Production
from core.services.production_service import ProductionService


def get_owned_production(
    production_id: Annotated[UUID, Path(description="Production UUID")],
    user: AuthUser = Depends(get_current_user),
) -> Production:
    """
    Load the production named in the path and check the caller owns it.

    Raises:
        ProductionNotFoundError: Missing, or owned by someone else
    """
    return ProductionService.get_production(str(production_id), user_id=user.id)


# Type alias for dependency injection
OwnedProduction = Annotated[Production, Depends(get_owned_production)]
