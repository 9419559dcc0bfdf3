# =============================================================================
# app/routers/crew.py - Crew List Endpoints
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, status
from pydantic import BaseModel

from app.dependencies import OwnedProduction
from core.models.crew import CrewMember, CrewMemberCreate
from core.services.crew_service import CrewService

router = APIRouter()


class CrewListResponse(BaseModel):
    production_id: str
    crew: list[CrewMember]


@router.get("/{production_id}/crew", response_model=CrewListResponse)
async def list_crew(production: OwnedProduction):
    """
    List crew members ordered by role.
    """
    return CrewListResponse(
        production_id=production.id,
        crew=CrewService.list_crew(production.id),
    )


@router.post(
    "/{production_id}/crew",
    response_model=CrewMember,
    status_code=status.HTTP_201_CREATED,
)
async def add_crew_member(
    production: OwnedProduction,
    request: CrewMemberCreate,
):
    """
    Add a crew member. Name and role are required.
    """
    return CrewService.add_member(production.id, request)


@router.delete(
    "/{production_id}/crew/{crew_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_crew_member(
    production: OwnedProduction,
    crew_id: Annotated[UUID, Path(description="Crew member UUID")],
):
    CrewService.remove_member(production.id, str(crew_id))
