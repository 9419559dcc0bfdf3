# =============================================================================
# core/models/look.py - Look Schemas
# =============================================================================
# A look is a named styling concept with an optional reference image,
# ordered within its production by sequence_order.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.ordering import MoveDirection


class LookCreate(BaseModel):
    """
    Schema for adding a look to the gallery.

    Example:
        {"name": "Evening Glamour"}
    """

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class LookUpdate(BaseModel):
    """
    Field-level look edits. Only fields present in the body are written.

    Example:
        {"image_url": "https://cdn.example.com/looks/denim.jpg"}
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    styling_notes: str | None = None
    image_url: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()


class Look(BaseModel):
    """A stored looks row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    production_id: str
    name: str
    description: str = ""
    image_url: str | None = None
    sequence_order: int = 0
    styling_notes: str = ""
    created_at: datetime | None = None

    @field_validator("description", "styling_notes", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return value or ""


class MoveLookRequest(BaseModel):
    """Move a look one position toward the start (up) or end (down)."""

    direction: MoveDirection
