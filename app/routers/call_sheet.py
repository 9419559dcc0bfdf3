# =============================================================================
# app/routers/call_sheet.py - Call Sheet Preview and PDF Export
# =============================================================================
# Provides:
# - JSON preview of the assembled call sheet (what the editor shows)
# - PDF download, rasterized and paginated onto A4 pages
# =============================================================================

import io
import logging
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from app.dependencies import OwnedProduction
from core.models.call_sheet import CallSheet
from core.services.call_sheet_service import CallSheetService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{production_id}/call-sheet", response_model=CallSheet)
async def preview_call_sheet(production: OwnedProduction):
    """
    Get the call sheet as structured sections.

    Missing production info shows as "TBD"; crew, looks and special
    notes sections are left out when empty.
    """
    return CallSheetService.build(production)


@router.get("/{production_id}/call-sheet/pdf")
def export_call_sheet_pdf(production: OwnedProduction):
    """
    Download the call sheet as a PDF.

    The file is named "{production name} - Call Sheet.pdf".
    Declared sync so the render runs in the threadpool, off the event loop.
    """
    pdf_bytes, file_name = CallSheetService.export_pdf(production)

    # RFC 5987 form keeps non-ASCII production names intact
    disposition = f"attachment; filename*=UTF-8''{quote(file_name)}"

    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": disposition},
    )
