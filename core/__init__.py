# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the production-management logic:
# - models/: Pydantic schemas for productions, schedules, looks, crew
#   and the assembled call sheet
# - ordering.py: Pure list reordering and index assignment
# - services/: Record store reads/writes per feature
#
# Code in this package should NOT import from FastAPI.
# =============================================================================
