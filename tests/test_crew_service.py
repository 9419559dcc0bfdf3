# =============================================================================
# tests/test_crew_service.py - Crew Service Tests
# =============================================================================

import pytest

from app.exceptions import CrewMemberNotFoundError
from core.models.crew import CrewMemberCreate
from core.services.crew_service import CrewService


class TestCrewService:
    def test_add_member(self, store, production):
        member = CrewService.add_member(
            production["id"],
            CrewMemberCreate(name="Alex Kim", role="Photographer", call_time="07:00", phone=" "),
        )

        (row,) = store.rows("crew_members")
        assert row["call_time"] == "07:00:00"
        assert row["phone"] is None
        assert member.role == "Photographer"

    def test_list_ordered_by_role(self, store, production):
        store.seed(
            "crew_members",
            {"production_id": production["id"], "name": "Jo", "role": "Stylist"},
            {"production_id": production["id"], "name": "Alex", "role": "Photographer"},
            {"production_id": production["id"], "name": "Kim", "role": "Hair"},
        )

        crew = CrewService.list_crew(production["id"])

        assert [m.role for m in crew] == ["Hair", "Photographer", "Stylist"]

    def test_list_read_failure_is_empty(self, store, production):
        store.fail_on("fetch_rows", "crew_members")

        assert CrewService.list_crew(production["id"]) == []

    def test_remove_member(self, store, production):
        (row,) = store.seed(
            "crew_members",
            {"production_id": production["id"], "name": "Jo", "role": "Stylist"},
        )

        CrewService.remove_member(production["id"], row["id"])

        assert store.rows("crew_members") == []

    def test_remove_missing(self, store, production):
        with pytest.raises(CrewMemberNotFoundError):
            CrewService.remove_member(production["id"], "missing")
