# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Principle: "Errors should tell HOW to fix, not just WHAT failed."
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from lib.supabase_client import SupabaseClientError


class BackToOneException(Exception):
    """
    Base exception for the Back To One API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "BACKTOONE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Not Found Exceptions
# =============================================================================

class ProductionNotFoundError(BackToOneException):
    """Raised when a production ID doesn't exist (or isn't yours)."""

    def __init__(self, production_id: str):
        super().__init__(
            message=f"Production not found: {production_id}",
            code="PRODUCTION_NOT_FOUND",
            status_code=404,
            suggestion="Check that the production_id is correct",
            details={"production_id": production_id}
        )


class ScheduleItemNotFoundError(BackToOneException):
    """Raised when a schedule item doesn't exist in the production."""

    def __init__(self, item_id: str):
        super().__init__(
            message=f"Schedule item not found: {item_id}",
            code="SCHEDULE_ITEM_NOT_FOUND",
            status_code=404,
            suggestion="Reload the schedule; the item may already have been removed",
            details={"item_id": item_id}
        )


class TemplateNotFoundError(BackToOneException):
    """Raised when a schedule template doesn't exist or isn't public."""

    def __init__(self, template_id: str):
        super().__init__(
            message=f"Schedule template not found: {template_id}",
            code="TEMPLATE_NOT_FOUND",
            status_code=404,
            suggestion="List available templates with GET /schedule-templates",
            details={"template_id": template_id}
        )


class LookNotFoundError(BackToOneException):
    """Raised when a look doesn't exist in the production."""

    def __init__(self, look_id: str):
        super().__init__(
            message=f"Look not found: {look_id}",
            code="LOOK_NOT_FOUND",
            status_code=404,
            suggestion="Reload the looks gallery; the look may already have been removed",
            details={"look_id": look_id}
        )


class CrewMemberNotFoundError(BackToOneException):
    """Raised when a crew member doesn't exist in the production."""

    def __init__(self, crew_id: str):
        super().__init__(
            message=f"Crew member not found: {crew_id}",
            code="CREW_MEMBER_NOT_FOUND",
            status_code=404,
            suggestion="Reload the crew list; the member may already have been removed",
            details={"crew_id": crew_id}
        )


# =============================================================================
# Schedule Template Exceptions
# =============================================================================

class InvalidTemplateError(BackToOneException):
    """Raised when a template's blueprint list fails validation."""

    def __init__(self, template_id: str, error: str):
        super().__init__(
            message=f"Schedule template is invalid: {error}",
            code="INVALID_TEMPLATE",
            status_code=422,
            suggestion="Every blueprint needs a title and a start_time (HH:MM)",
            details={"template_id": template_id, "error": error}
        )


class TemplateConfirmationRequiredError(BackToOneException):
    """Raised when applying a template would replace an existing schedule."""

    def __init__(self, production_id: str, existing_count: int):
        super().__init__(
            message=f"This will replace your current schedule ({existing_count} items)",
            code="CONFIRMATION_REQUIRED",
            status_code=409,
            suggestion="Resend the request with \"confirm\": true to replace the schedule",
            details={"production_id": production_id, "existing_count": existing_count}
        )


class TemplateApplyError(BackToOneException):
    """Raised when template items could not be written."""

    def __init__(self, production_id: str, error: str, restored: bool):
        suggestion = (
            "The previous schedule was restored. Try applying the template again"
            if restored
            else "The previous schedule could not be restored and is now empty. Re-apply the template or add items manually"
        )
        super().__init__(
            message=f"Error applying template: {error}",
            code="TEMPLATE_APPLY_FAILED",
            status_code=502,
            suggestion=suggestion,
            details={"production_id": production_id, "restored": restored}
        )


# =============================================================================
# Ordering Exceptions
# =============================================================================

class ReorderError(BackToOneException):
    """Raised when a move could not be persisted."""

    def __init__(self, record_id: str, error: str, reverted: bool):
        super().__init__(
            message=f"Failed to save new order: {error}",
            code="REORDER_FAILED",
            status_code=502,
            suggestion="Reload the list to see the stored order, then try again",
            details={"record_id": record_id, "reverted": reverted}
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidFileTypeError(BackToOneException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(BackToOneException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class StorageUploadError(BackToOneException):
    """Raised when file upload to storage fails."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to upload image: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=502,
            suggestion="Try again later or contact support if the issue persists",
            details={"error": error}
        )


# =============================================================================
# Export Exceptions
# =============================================================================

class CallSheetExportError(BackToOneException):
    """Raised when the call sheet PDF could not be generated."""

    def __init__(self, production_id: str, error: str):
        super().__init__(
            message="Failed to generate PDF",
            code="CALL_SHEET_EXPORT_FAILED",
            status_code=500,
            suggestion="Check the production details and try again",
            details={"production_id": production_id, "error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def backtoone_exception_handler(
    request: Request,
    exc: BackToOneException
) -> JSONResponse:
    """
    Convert BackToOneException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def record_store_exception_handler(
    request: Request,
    exc: SupabaseClientError
) -> JSONResponse:
    """
    Convert SupabaseClientError to a 502 response.

    The record store is an upstream service, so its failures are
    reported as a bad gateway rather than an internal error.
    """
    return JSONResponse(
        status_code=502,
        content=exc.to_dict()
    )
