# =============================================================================
# core/services/call_sheet_service.py - Call Sheet Assembly and Export
# =============================================================================
# Builds the call sheet from a production, its crew and its looks, and
# exports it as a paginated PDF.
#
# assemble_call_sheet() is pure: it only formats what it is given, with
# "TBD" for missing production info and "-" for missing crew cells.
# =============================================================================

import logging

from lib.formatting import format_date_label, format_time_label
from lib.pdf_renderer import render_call_sheet_pdf
from core.models.call_sheet import (
    TBD,
    EMPTY_CELL,
    CallSheet,
    CrewRow,
    LabeledValue,
)
from core.models.crew import CrewMember
from core.models.look import Look
from core.models.production import Production
from core.services.crew_service import CrewService
from core.services.look_service import LookService
from app.config import settings
from app.exceptions import CallSheetExportError

logger = logging.getLogger(__name__)


def assemble_call_sheet(
    production: Production,
    crew: list[CrewMember],
    looks: list[Look],
) -> CallSheet:
    """
    Compose the call sheet sections from current state.

    Args:
        production: The production (header, info, location, contacts, notes)
        crew: Crew in display order (by role)
        looks: Looks in gallery order; numbered from 1

    Returns:
        The assembled CallSheet
    """
    producer = production.producer_name or TBD
    producer_phone = production.producer_phone or TBD
    call_time = format_time_label(production.call_time) if production.call_time else TBD

    location = [LabeledValue(label="Address", value=production.location_address or TBD)]
    for label, value in (
        ("Details", production.location_details),
        ("Parking", production.parking_info),
        ("Weather Backup", production.weather_backup),
    ):
        if value:
            location.append(LabeledValue(label=label, value=value))

    crew_rows = [
        CrewRow(
            name=member.name,
            role=member.role,
            call_time=format_time_label(member.call_time) if member.call_time else EMPTY_CELL,
            phone=member.phone or EMPTY_CELL,
        )
        for member in crew
    ]

    return CallSheet(
        production_id=production.id,
        production_name=production.name,
        client_line=f"Client: {production.client_name}" if production.client_name else None,
        info=[
            LabeledValue(label="Date", value=format_date_label(production.shoot_date) or TBD),
            LabeledValue(label="Call Time", value=call_time),
            LabeledValue(label="Producer", value=producer),
            LabeledValue(label="Phone", value=producer_phone),
        ],
        location=location,
        crew=crew_rows,
        looks=[f"Look {number}: {look.name}" for number, look in enumerate(looks, start=1)],
        emergency_contacts=[
            LabeledValue(label="Producer", value=f"{producer} - {producer_phone}"),
            LabeledValue(label="Emergency Services", value="911"),
        ],
        special_notes=production.special_notes or None,
    )


class CallSheetService:
    """Service for building and exporting call sheets."""

    @staticmethod
    def build(production: Production) -> CallSheet:
        """Load crew and looks for a production and assemble its call sheet."""
        crew = CrewService.list_crew(production.id)
        looks = LookService.list_looks(production.id)
        return assemble_call_sheet(production, crew, looks)

    @staticmethod
    def export_pdf(production: Production) -> tuple[bytes, str]:
        """
        Render the production's call sheet to PDF.

        Returns:
            (PDF bytes, download file name)

        Raises:
            CallSheetExportError: If assembly or rendering fails
        """
        try:
            call_sheet = CallSheetService.build(production)
            pdf_bytes = render_call_sheet_pdf(
                call_sheet,
                scale=settings.PDF_SCALE,
                base_width=settings.PDF_BASE_WIDTH_PX,
            )
        except Exception as e:
            logger.exception(f"Error generating PDF for production {production.id}: {e}")
            raise CallSheetExportError(production.id, str(e))

        logger.info(f"PDF generated successfully for production {production.id} ({len(pdf_bytes)} bytes)")
        return pdf_bytes, call_sheet.file_name
