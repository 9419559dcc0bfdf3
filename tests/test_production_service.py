# =============================================================================
# tests/test_production_service.py - Production Service Tests
# =============================================================================

import pytest

from app.exceptions import ProductionNotFoundError
from core.models.production import ProductionCreate, ProductionUpdate
from core.services.production_service import ProductionService
from lib.supabase_client import SupabaseClientError
from tests.conftest import OTHER_USER_ID, USER_ID


class TestCreateProduction:
    def test_create_sets_owner(self, store):
        """Test that the new row carries the caller's user_id."""
        # Act
        production = ProductionService.create_production(
            USER_ID, ProductionCreate(name=" Resort Campaign ", shoot_date="2025-03-07")
        )

        # Assert
        (row,) = store.rows("productions")
        assert row["user_id"] == str(USER_ID)
        assert row["name"] == "Resort Campaign"
        assert row["shoot_date"] == "2025-03-07"
        assert production.id == row["id"]

    def test_create_failure_propagates(self, store):
        store.fail_on("insert_rows", "productions")

        with pytest.raises(SupabaseClientError):
            ProductionService.create_production(USER_ID, ProductionCreate(name="Resort"))

        assert store.rows("productions") == []


class TestGetProduction:
    def test_get_own_production(self, production):
        result = ProductionService.get_production(production["id"], user_id=USER_ID)

        assert result.name == "Spring Denim Lookbook"

    def test_other_users_production_is_not_found(self, production):
        with pytest.raises(ProductionNotFoundError):
            ProductionService.get_production(production["id"], user_id=OTHER_USER_ID)

    def test_missing(self, store):
        with pytest.raises(ProductionNotFoundError):
            ProductionService.get_production("does-not-exist")


class TestListProductions:
    def test_newest_first_and_owned_only(self, store):
        store.seed(
            "productions",
            {"name": "Old", "user_id": str(USER_ID), "created_at": "2025-01-01T00:00:00+00:00"},
            {"name": "New", "user_id": str(USER_ID), "created_at": "2025-02-01T00:00:00+00:00"},
            {"name": "Theirs", "user_id": str(OTHER_USER_ID), "created_at": "2025-03-01T00:00:00+00:00"},
        )

        productions = ProductionService.list_productions(USER_ID)

        assert [p.name for p in productions] == ["New", "Old"]

    def test_read_failure_is_empty(self, store):
        store.fail_on("fetch_rows", "productions")

        assert ProductionService.list_productions(USER_ID) == []


class TestUpdateProduction:
    def test_only_sent_fields_written(self, store, production):
        updated = ProductionService.update_production(
            production["id"],
            ProductionUpdate(producer_name="Sam Rivera", call_time="07:30"),
            user_id=USER_ID,
        )

        assert updated.producer_name == "Sam Rivera"
        (row,) = store.rows("productions")
        assert row["call_time"] == "07:30:00"
        assert "location_address" not in row

    def test_clear_field_with_null(self, store):
        (row,) = store.seed(
            "productions",
            {"name": "Shoot", "user_id": str(USER_ID), "parking_info": "Lot B"},
        )

        updated = ProductionService.update_production(
            row["id"], ProductionUpdate(parking_info=None), user_id=USER_ID
        )

        assert updated.parking_info is None

    def test_empty_update_is_noop(self, store, production):
        ProductionService.update_production(production["id"], ProductionUpdate())

        assert ("update_row", "productions") not in store.calls
