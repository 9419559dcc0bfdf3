# =============================================================================
# core/models/schedule.py - Schedule Schemas
# =============================================================================
# These models support the schedule builder:
# - ScheduleCategory: fixed set of item categories
# - TemplateBlueprint: one item of a reusable schedule template
# - ScheduleTemplate: a read-only catalog entry (validated on load)
# - ScheduleItemCreate / ScheduleItem: manual and stored schedule items
# - ScheduleView: items decorated with display labels, plus a summary
#
# Schedule items are displayed by start time. Their sequence_order is written
# on creation and by templates but is not used for display.
# =============================================================================

from datetime import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lib.formatting import format_duration_label, format_time_label


class ScheduleCategory(str, Enum):
    """
    Category of a schedule item.

    GENERAL is the default for manual items and for blueprints that
    don't name a category.
    """
    SETUP = "setup"
    PREP = "prep"
    SHOOT = "shoot"
    BREAK = "break"
    WRAP = "wrap"
    GENERAL = "general"


class TemplateBlueprint(BaseModel):
    """
    One schedule item inside a template.

    Shaped like a ScheduleItem minus identity, production link and
    sequence_order (which comes from the blueprint's position).
    """

    title: str = Field(..., min_length=1)
    start_time: time
    description: str | None = None
    end_time: time | None = None
    category: ScheduleCategory | None = None
    location: str | None = None
    notes: str | None = None

    @field_validator("description", "location", "notes", mode="before")
    @classmethod
    def empty_to_none(cls, value):
        # Template JSON is hand-written; "" and null mean the same thing
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("category", mode="before")
    @classmethod
    def blank_category(cls, value):
        if value == "":
            return None
        return value


class ScheduleTemplate(BaseModel):
    """
    A reusable, named, ordered list of schedule blueprints.

    Built from a schedule_templates row; the template_data JSON array is
    parsed into TemplateBlueprint records here so bad templates are caught
    when the catalog is loaded rather than halfway through an apply.
    """

    id: str
    name: str
    description: str = ""
    blueprints: list[TemplateBlueprint] = Field(default_factory=list)

    @classmethod
    def from_db_row(cls, row: dict) -> "ScheduleTemplate":
        """Create a ScheduleTemplate from a schedule_templates row."""
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            description=row.get("description") or "",
            blueprints=row.get("template_data") or [],
        )


class ScheduleItemCreate(BaseModel):
    """
    Schema for adding a schedule item by hand.

    Example:
        {
            "title": "Hair & Makeup",
            "start_time": "07:30",
            "end_time": "09:00",
            "category": "prep"
        }
    """

    title: str = Field(..., min_length=1, max_length=255)
    start_time: time
    end_time: time | None = None
    description: str | None = None
    category: ScheduleCategory = ScheduleCategory.GENERAL
    location: str | None = None
    notes: str | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


class ScheduleItem(BaseModel):
    """A stored schedule_items row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    production_id: str
    title: str
    description: str = ""
    start_time: time
    end_time: time | None = None
    category: ScheduleCategory = ScheduleCategory.GENERAL
    location: str | None = None
    notes: str | None = None
    sequence_order: int = 0

    @field_validator("description", mode="before")
    @classmethod
    def none_description(cls, value):
        return value or ""


class ScheduleItemView(ScheduleItem):
    """A schedule item with its display labels."""

    start_label: str
    end_label: str | None = None
    duration_label: str = ""

    @classmethod
    def from_item(cls, item: ScheduleItem) -> "ScheduleItemView":
        return cls(
            **item.model_dump(),
            start_label=format_time_label(item.start_time),
            end_label=format_time_label(item.end_time) if item.end_time else None,
            duration_label=format_duration_label(item.start_time, item.end_time),
        )


class ScheduleSummary(BaseModel):
    """Counts shown under the timeline."""

    setup_items: int = 0
    shoot_blocks: int = 0
    breaks: int = 0
    total_items: int = 0


class ScheduleView(BaseModel):
    """The schedule builder's timeline for one production."""

    production_id: str
    items: list[ScheduleItemView] = Field(default_factory=list)
    summary: ScheduleSummary = Field(default_factory=ScheduleSummary)


class ApplyTemplateRequest(BaseModel):
    """
    Request to seed or replace a schedule from a template.

    confirm must be true when the production already has items.
    """

    template_id: str
    confirm: bool = False
