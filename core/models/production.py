# =============================================================================
# core/models/production.py - Production Schemas
# =============================================================================
# These models define the API contract for production operations:
# - ProductionCreate: Input for creating a new production (dashboard)
# - ProductionUpdate: Field-level edits (call-sheet editor)
# - Production: A stored production row
#
# A production is a single fashion photo/video shoot. Schedule items, looks
# and crew members all belong to exactly one production.
# =============================================================================

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductionCreate(BaseModel):
    """
    Schema for creating a new production.

    Example:
        {
            "name": "Spring Denim Lookbook"
        }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Production name shown on the dashboard and call sheet"
    )

    shoot_date: date | None = Field(
        default=None,
        description="Day of the shoot"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        """Names are stored trimmed and may not be blank."""
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class ProductionUpdate(BaseModel):
    """
    Schema for field-level production edits.

    Only the fields present in the request body are written.
    Unknown fields are rejected so typos don't silently no-op.

    Example:
        {
            "producer_name": "Sam Rivera",
            "call_time": "07:30"
        }
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    shoot_date: date | None = None
    shoot_start_time: time | None = None
    shoot_end_time: time | None = None
    call_time: time | None = None

    # Location
    location_address: str | None = None
    location_details: str | None = None
    parking_info: str | None = None
    weather_backup: str | None = None

    # Contacts
    client_name: str | None = None
    producer_name: str | None = None
    producer_phone: str | None = None

    special_notes: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str | None) -> str:
        """A name can be changed but never cleared."""
        if value is None or not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()


class Production(BaseModel):
    """
    A stored production row.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Spring Denim Lookbook",
            "shoot_date": "2025-03-07",
            "call_time": "07:30:00",
            "created_at": "2025-02-01T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    user_id: str | None = None

    shoot_date: date | None = None
    shoot_start_time: time | None = None
    shoot_end_time: time | None = None
    call_time: time | None = None

    location_address: str | None = None
    location_details: str | None = None
    parking_info: str | None = None
    weather_backup: str | None = None

    client_name: str | None = None
    producer_name: str | None = None
    producer_phone: str | None = None

    special_notes: str | None = None
    created_at: datetime | None = None


class ProductionList(BaseModel):
    """Productions owned by the caller, newest first."""

    productions: list[Production] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
