# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .production_service import ProductionService
from .schedule_service import ScheduleService
from .template_service import TemplateService
from .look_service import LookService
from .crew_service import CrewService
from .storage_service import StorageService
from .call_sheet_service import CallSheetService

__all__ = [
    "ProductionService",
    "ScheduleService",
    "TemplateService",
    "LookService",
    "CrewService",
    "StorageService",
    "CallSheetService",
]
