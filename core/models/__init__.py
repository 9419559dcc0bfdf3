# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - production.py: Production create/update/read schemas
# - schedule.py: Schedule items, categories and templates
# - look.py: Looks gallery schemas
# - crew.py: Crew member schemas
# - call_sheet.py: Assembled call sheet document
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Production Models
# -----------------------------------------------------------------------------
from .production import (
    Production,
    ProductionCreate,
    ProductionList,
    ProductionUpdate,
)

# -----------------------------------------------------------------------------
# Schedule Models
# -----------------------------------------------------------------------------
from .schedule import (
    ApplyTemplateRequest,
    ScheduleCategory,
    ScheduleItem,
    ScheduleItemCreate,
    ScheduleItemView,
    ScheduleSummary,
    ScheduleTemplate,
    ScheduleView,
    TemplateBlueprint,
)

# -----------------------------------------------------------------------------
# Look Models
# -----------------------------------------------------------------------------
from .look import (
    Look,
    LookCreate,
    LookUpdate,
    MoveDirection,
    MoveLookRequest,
)

# -----------------------------------------------------------------------------
# Crew Models
# -----------------------------------------------------------------------------
from .crew import (
    CrewMember,
    CrewMemberCreate,
)

# -----------------------------------------------------------------------------
# Call Sheet Models
# -----------------------------------------------------------------------------
from .call_sheet import (
    CallSheet,
    CrewRow,
    LabeledValue,
)

__all__ = [
    # Production
    "Production",
    "ProductionCreate",
    "ProductionList",
    "ProductionUpdate",
    # Schedule
    "ApplyTemplateRequest",
    "ScheduleCategory",
    "ScheduleItem",
    "ScheduleItemCreate",
    "ScheduleItemView",
    "ScheduleSummary",
    "ScheduleTemplate",
    "ScheduleView",
    "TemplateBlueprint",
    # Look
    "Look",
    "LookCreate",
    "LookUpdate",
    "MoveDirection",
    "MoveLookRequest",
    # Crew
    "CrewMember",
    "CrewMemberCreate",
    # Call sheet
    "CallSheet",
    "CrewRow",
    "LabeledValue",
]
