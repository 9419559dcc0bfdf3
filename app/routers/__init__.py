# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - productions.py: Dashboard and production detail endpoints
# - schedule.py: Schedule builder and template catalog endpoints
# - looks.py: Looks gallery endpoints (incl. image upload and reordering)
# - crew.py: Crew list endpoints
# - call_sheet.py: Call sheet preview and PDF export
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import productions
from . import schedule
from . import looks
from . import crew
from . import call_sheet

__all__ = [
    "health",
    "productions",
    "schedule",
    "looks",
    "crew",
    "call_sheet",
]
