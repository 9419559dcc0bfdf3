# =============================================================================
# core/models/crew.py - Crew Member Schemas
# =============================================================================

from datetime import time

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrewMemberCreate(BaseModel):
    """
    Schema for adding a crew member from the call-sheet editor.

    Example:
        {
            "name": "Alex Kim",
            "role": "Photographer",
            "call_time": "07:00",
            "phone": "555-0134"
        }
    """

    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=255)
    call_time: time | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None

    @field_validator("name", "role")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("call_time", mode="before")
    @classmethod
    def blank_call_time(cls, value):
        # The time input posts "" when left empty
        if value == "":
            return None
        return value


class CrewMember(BaseModel):
    """A stored crew_members row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    production_id: str
    name: str
    role: str
    call_time: time | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None
