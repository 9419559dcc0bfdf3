# =============================================================================
# app/routers/productions.py - Production Endpoints
# =============================================================================
# Dashboard (create, list) and call-sheet editor (read, field edits).
# All endpoints require authentication.
# =============================================================================

from fastapi import APIRouter, Depends, status

from app.auth import AuthUser, get_current_user
from app.dependencies import OwnedProduction
from core.models.production import (
    Production,
    ProductionCreate,
    ProductionList,
    ProductionUpdate,
)
from core.services.production_service import ProductionService

router = APIRouter()


@router.post("", response_model=Production, status_code=status.HTTP_201_CREATED)
async def create_production(
    request: ProductionCreate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Create a new production.

    The name is trimmed and must not be blank. Open the production's
    schedule, looks and call sheet with the returned id.
    """
    return ProductionService.create_production(user_id=user.id, request=request)


@router.get("", response_model=ProductionList)
async def list_productions(
    user: AuthUser = Depends(get_current_user),
):
    """
    List the caller's productions, newest first.
    """
    productions = ProductionService.list_productions(user_id=user.id)
    return ProductionList(productions=productions, total=len(productions))


@router.get("/{production_id}", response_model=Production)
async def get_production(production: OwnedProduction):
    """
    Get one production with all call-sheet fields.
    """
    return production


@router.patch("/{production_id}", response_model=Production)
async def update_production(
    production: OwnedProduction,
    request: ProductionUpdate,
):
    """
    Edit production details.

    Only the fields in the body are written; send null to clear a field.
    Changes show on the call sheet preview immediately.
    """
    return ProductionService.update_production(production.id, request)
