# =============================================================================
# core/models/call_sheet.py - Call Sheet Document Schema
# =============================================================================
# The call sheet is the one-page logistics document sent to crew. These
# models hold the fully resolved text of each section, so the JSON preview
# and the PDF renderer show exactly the same thing.
#
# Section order:
#   header -> production info -> LOCATION -> CREW -> LOOKS
#   -> EMERGENCY CONTACTS -> SPECIAL NOTES
#
# CREW, LOOKS and SPECIAL NOTES are omitted when empty.
# =============================================================================

from pydantic import BaseModel, Field

TITLE = "CALL SHEET"
TBD = "TBD"
EMPTY_CELL = "-"

CREW_COLUMNS = ("Name", "Role", "Call Time", "Phone")


class LabeledValue(BaseModel):
    """A 'Label: value' line."""

    label: str
    value: str


class CrewRow(BaseModel):
    """One row of the crew table; missing cells hold EMPTY_CELL."""

    name: str
    role: str
    call_time: str = EMPTY_CELL
    phone: str = EMPTY_CELL

    def cells(self) -> tuple[str, str, str, str]:
        return (self.name, self.role, self.call_time, self.phone)


class CallSheet(BaseModel):
    """
    An assembled call sheet.

    Example:
        {
            "production_name": "Spring Denim Lookbook",
            "client_line": "Client: Acme Denim",
            "info": [{"label": "Date", "value": "3/7/2025"}, ...],
            "location": [{"label": "Address", "value": "TBD"}],
            "crew": [],
            "looks": ["Look 1: Casual Denim"],
            "emergency_contacts": [...],
            "special_notes": null
        }
    """

    production_id: str
    title: str = TITLE
    production_name: str
    client_line: str | None = None

    info: list[LabeledValue] = Field(default_factory=list)
    location: list[LabeledValue] = Field(default_factory=list)
    crew: list[CrewRow] = Field(default_factory=list)
    looks: list[str] = Field(default_factory=list)
    emergency_contacts: list[LabeledValue] = Field(default_factory=list)
    special_notes: str | None = None

    def section_titles(self) -> list[str]:
        """Headings of the sections that will appear, in order."""
        titles = ["LOCATION"]
        if self.crew:
            titles.append("CREW")
        if self.looks:
            titles.append("LOOKS")
        titles.append("EMERGENCY CONTACTS")
        if self.special_notes:
            titles.append("SPECIAL NOTES")
        return titles

    @property
    def file_name(self) -> str:
        """Download name for the exported PDF."""
        return f"{self.production_name} - Call Sheet.pdf"
