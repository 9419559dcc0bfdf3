# =============================================================================
# app/routers/looks.py - Looks Gallery Endpoints
# =============================================================================
# Handles the production's looks: create, edit, reference image upload,
# one-step reordering and delete.
# =============================================================================

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, File, Path, UploadFile, status
from pydantic import BaseModel

from app.dependencies import OwnedProduction
from core.models.look import Look, LookCreate, LookUpdate, MoveLookRequest
from core.services.look_service import LookService

logger = logging.getLogger(__name__)

router = APIRouter()

LookId = Annotated[UUID, Path(description="Look UUID")]


class LookListResponse(BaseModel):
    """Looks in gallery order."""
    production_id: str
    looks: list[Look]


@router.get("/{production_id}/looks", response_model=LookListResponse)
async def list_looks(production: OwnedProduction):
    """
    List looks in gallery order (sequence_order ascending).
    """
    return LookListResponse(
        production_id=production.id,
        looks=LookService.list_looks(production.id),
    )


@router.post(
    "/{production_id}/looks",
    response_model=Look,
    status_code=status.HTTP_201_CREATED,
)
async def create_look(
    production: OwnedProduction,
    request: LookCreate,
):
    """
    Add a look at the end of the gallery.
    """
    return LookService.create_look(production.id, request)


@router.patch("/{production_id}/looks/{look_id}", response_model=Look)
async def update_look(
    production: OwnedProduction,
    look_id: LookId,
    request: LookUpdate,
):
    """
    Edit a look's name, description, styling notes or image URL.
    """
    return LookService.update_look(production.id, str(look_id), request)


@router.post("/{production_id}/looks/{look_id}/image", response_model=Look)
async def upload_look_image(
    production: OwnedProduction,
    look_id: LookId,
    file: UploadFile = File(..., description="Reference image (JPEG, PNG, WebP or GIF)"),
):
    """
    Upload a reference image for a look.

    The image is stored in Supabase Storage and the look's image_url is
    set to its public URL.
    """
    content = await file.read()
    logger.info(f"Received look image {file.filename} ({len(content)} bytes) for look {look_id}")

    return LookService.upload_image(
        production.id,
        str(look_id),
        content=content,
        filename=file.filename or "image",
        content_type=file.content_type,
    )


@router.post("/{production_id}/looks/{look_id}/move", response_model=LookListResponse)
async def move_look(
    production: OwnedProduction,
    look_id: LookId,
    request: MoveLookRequest,
):
    """
    Move a look one position up or down.

    Moving the first look up or the last look down leaves the order
    unchanged. Returns the gallery in its new order.
    """
    looks = LookService.move_look(production.id, str(look_id), request.direction)
    return LookListResponse(production_id=production.id, looks=looks)


@router.delete(
    "/{production_id}/looks/{look_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_look(
    production: OwnedProduction,
    look_id: LookId,
):
    """
    Delete a look. The remaining looks keep their positions.
    """
    LookService.delete_look(production.id, str(look_id))
