# =============================================================================
# app/routers/schedule.py - Schedule Builder Endpoints
# =============================================================================
# Endpoints:
# - GET    /productions/{id}/schedule                  Timeline + summary
# - POST   /productions/{id}/schedule                  Add an item by hand
# - DELETE /productions/{id}/schedule/{item_id}        Remove an item
# - POST   /productions/{id}/schedule/apply-template   Seed/replace from template
# - GET    /schedule-templates                         Public template catalog
#
# `router` is mounted under /productions, `templates_router` at the API root.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from pydantic import BaseModel, Field

from app.auth import AuthUser, get_current_user
from app.dependencies import OwnedProduction
from core.models.schedule import (
    ApplyTemplateRequest,
    ScheduleItem,
    ScheduleItemCreate,
    ScheduleItemView,
    ScheduleView,
)
from core.services.schedule_service import ScheduleService, summarize
from core.services.template_service import TemplateService

router = APIRouter()
templates_router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class TemplateSummary(BaseModel):
    """A catalog entry as shown in the template picker."""
    id: str
    name: str
    description: str = ""
    item_count: int = Field(..., ge=0)


class TemplateListResponse(BaseModel):
    templates: list[TemplateSummary]


# =============================================================================
# Schedule Endpoints
# =============================================================================

@router.get("/{production_id}/schedule", response_model=ScheduleView)
async def get_schedule(production: OwnedProduction):
    """
    Get the production's schedule ordered by start time.

    Each item carries 12-hour start/end labels and a duration label;
    the summary counts setup items, shoot blocks and breaks.
    """
    return ScheduleService.get_view(production.id)


@router.post(
    "/{production_id}/schedule",
    response_model=ScheduleItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_schedule_item(
    production: OwnedProduction,
    request: ScheduleItemCreate,
):
    """
    Add a schedule item. Category defaults to general.
    """
    return ScheduleService.add_item(production.id, request)


@router.delete(
    "/{production_id}/schedule/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_schedule_item(
    production: OwnedProduction,
    item_id: Annotated[UUID, Path(description="Schedule item UUID")],
):
    """
    Delete one schedule item.
    """
    ScheduleService.delete_item(production.id, str(item_id))


@router.post("/{production_id}/schedule/apply-template", response_model=ScheduleView)
async def apply_template(
    production: OwnedProduction,
    request: ApplyTemplateRequest,
):
    """
    Fill the schedule from a template.

    If the production already has schedule items, the request must carry
    `"confirm": true`; otherwise a 409 CONFIRMATION_REQUIRED is returned
    with the number of items that would be replaced.
    """
    items = TemplateService.apply_template(
        production.id,
        request.template_id,
        confirm=request.confirm,
    )
    return ScheduleView(
        production_id=production.id,
        items=[ScheduleItemView.from_item(item) for item in items],
        summary=summarize(items),
    )


# =============================================================================
# Template Catalog
# =============================================================================

@templates_router.get("/schedule-templates", response_model=TemplateListResponse)
async def list_templates(
    user: AuthUser = Depends(get_current_user),
):
    """
    List public schedule templates, alphabetically.
    """
    templates = TemplateService.list_templates()
    return TemplateListResponse(
        templates=[
            TemplateSummary(
                id=t.id,
                name=t.name,
                description=t.description,
                item_count=len(t.blueprints),
            )
            for t in templates
        ]
    )
