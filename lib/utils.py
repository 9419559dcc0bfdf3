# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - UUID normalization for record store queries
# - Form-text cleanup (trim, blank -> None)
# - ApplicationError base for non-HTTP errors raised from lib/
# =============================================================================

from typing import Any
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Example:
        production_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        production_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Text Utilities
# =============================================================================

def clean_text(value: str | None) -> str:
    """Trim a form value; None becomes the empty string."""
    return (value or "").strip()


def blank_to_none(value: str | None) -> str | None:
    """
    Trim a form value and collapse blanks to None.

    Optional text columns are stored as null rather than "".

    Example:
        blank_to_none("  Studio B ")  # "Studio B"
        blank_to_none("   ")          # None
    """
    cleaned = clean_text(value)
    return cleaned or None


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors outside the HTTP layer.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class CallSheetRenderError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="RENDER_FAILED", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
