# =============================================================================
# tests/test_schedule_service.py - Schedule Builder Tests
# =============================================================================

import pytest

from app.exceptions import ScheduleItemNotFoundError
from core.models.schedule import ScheduleCategory, ScheduleItemCreate
from core.services.schedule_service import ScheduleService
from lib.supabase_client import SupabaseClientError


def _seed_items(store, production_id):
    return store.seed(
        "schedule_items",
        {"production_id": production_id, "title": "Lunch", "start_time": "12:00:00",
         "end_time": "12:30:00", "category": "break", "sequence_order": 0},
        {"production_id": production_id, "title": "Crew Call", "start_time": "07:00:00",
         "category": "setup", "sequence_order": 1},
        {"production_id": production_id, "title": "Shoot Block 1", "start_time": "09:00:00",
         "end_time": "11:30:00", "category": "shoot", "sequence_order": 2},
    )


class TestListItems:
    def test_ordered_by_start_time(self, store, production):
        """Test that display order follows start_time, not sequence_order."""
        _seed_items(store, production["id"])

        items = ScheduleService.list_items(production["id"])

        assert [item.title for item in items] == ["Crew Call", "Shoot Block 1", "Lunch"]

    def test_other_productions_excluded(self, store, production):
        _seed_items(store, "another-production")

        assert ScheduleService.list_items(production["id"]) == []

    def test_read_failure_lenient(self, store, production):
        store.fail_on("fetch_rows", "schedule_items")

        assert ScheduleService.list_items(production["id"]) == []

    def test_read_failure_strict(self, store, production):
        store.fail_on("fetch_rows", "schedule_items")

        with pytest.raises(SupabaseClientError):
            ScheduleService.list_items(production["id"], strict=True)


class TestScheduleView:
    def test_labels_and_summary(self, store, production):
        _seed_items(store, production["id"])

        view = ScheduleService.get_view(production["id"])

        first, second, third = view.items
        assert first.start_label == "7:00 AM"
        assert first.end_label is None
        assert first.duration_label == ""
        assert second.duration_label == "2.5h"
        assert third.duration_label == "30min"

        assert view.summary.setup_items == 1
        assert view.summary.shoot_blocks == 1
        assert view.summary.breaks == 1
        assert view.summary.total_items == 3

    def test_empty_schedule(self, store, production):
        view = ScheduleService.get_view(production["id"])

        assert view.items == []
        assert view.summary.total_items == 0


class TestAddItem:
    def test_first_item_gets_index_zero(self, store, production):
        item = ScheduleService.add_item(
            production["id"],
            ScheduleItemCreate(title="Crew Call", start_time="07:00", location="  "),
        )

        assert item.sequence_order == 0
        assert item.category == ScheduleCategory.GENERAL
        (row,) = store.rows("schedule_items")
        assert row["start_time"] == "07:00:00"
        assert row["location"] is None
        assert row["description"] == ""

    def test_appends_after_highest_index(self, store, production):
        _seed_items(store, production["id"])

        item = ScheduleService.add_item(
            production["id"],
            ScheduleItemCreate(title="Wrap", start_time="17:00", category="wrap"),
        )

        assert item.sequence_order == 3

    def test_read_failure_blocks_add(self, store, production):
        """A failed sibling read must not restart numbering at 0."""
        _seed_items(store, production["id"])
        store.fail_on("fetch_rows", "schedule_items")

        with pytest.raises(SupabaseClientError):
            ScheduleService.add_item(
                production["id"], ScheduleItemCreate(title="Wrap", start_time="17:00")
            )

        assert len(store.rows("schedule_items")) == 3

    def test_insert_failure_propagates(self, store, production):
        store.fail_on("insert_rows", "schedule_items")

        with pytest.raises(SupabaseClientError):
            ScheduleService.add_item(
                production["id"], ScheduleItemCreate(title="Wrap", start_time="17:00")
            )


class TestDeleteItem:
    def test_delete(self, store, production):
        rows = _seed_items(store, production["id"])

        ScheduleService.delete_item(production["id"], rows[0]["id"])

        assert len(store.rows("schedule_items")) == 2

    def test_delete_from_other_production_not_found(self, store, production):
        (row,) = store.seed(
            "schedule_items",
            {"production_id": "other", "title": "Lunch", "start_time": "12:00:00"},
        )

        with pytest.raises(ScheduleItemNotFoundError):
            ScheduleService.delete_item(production["id"], row["id"])

        assert len(store.rows("schedule_items")) == 1
