# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for record store operations
# - formatting.py: 12-hour time, duration and date labels
# - pdf_renderer.py: Call sheet rasterizer and A4 paginator
# - utils.py: Shared utilities (error base class, UUID and text cleanup)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import ApplicationError, blank_to_none, clean_text, normalize_uuid

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Utils
    "ApplicationError",
    "blank_to_none",
    "clean_text",
    "normalize_uuid",
]
