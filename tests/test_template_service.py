# =============================================================================
# tests/test_template_service.py - Template Catalog and Expansion Tests
# =============================================================================
# This module contains tests for:
# - expand_blueprints (pure mapping)
# - Catalog loading with invalid templates skipped
# - apply_template: confirmation, replacement, and restore on failure
# =============================================================================

from datetime import time

import pytest

from app.exceptions import (
    InvalidTemplateError,
    TemplateApplyError,
    TemplateConfirmationRequiredError,
    TemplateNotFoundError,
)
from core.models.schedule import TemplateBlueprint
from core.services.template_service import TemplateService, expand_blueprints
from lib.supabase_client import SupabaseClientError


# =============================================================================
# expand_blueprints
# =============================================================================

class TestExpandBlueprints:
    def test_one_row_per_blueprint_in_order(self, template_rows):
        blueprints = [TemplateBlueprint(**row) for row in template_rows]

        rows = expand_blueprints(blueprints, "prod-1")

        assert len(rows) == 5
        assert [row["sequence_order"] for row in rows] == [0, 1, 2, 3, 4]
        assert all(row["production_id"] == "prod-1" for row in rows)

    def test_defaults(self):
        (row,) = expand_blueprints(
            [TemplateBlueprint(title="Wrap", start_time=time(17, 0))], "prod-1"
        )

        assert row == {
            "production_id": "prod-1",
            "title": "Wrap",
            "description": "",
            "start_time": "17:00:00",
            "end_time": None,
            "category": "general",
            "location": None,
            "notes": None,
            "sequence_order": 0,
        }

    def test_empty_template(self):
        assert expand_blueprints([], "prod-1") == []


# =============================================================================
# Catalog
# =============================================================================

class TestCatalog:
    def test_invalid_templates_skipped(self, store, template):
        store.seed(
            "schedule_templates",
            {"name": "Broken", "is_public": True, "template_data": [{"start_time": "07:00"}]},
            {"name": "Private", "is_public": False, "template_data": []},
        )

        templates = TemplateService.list_templates()

        assert [t.name for t in templates] == ["Full Day Shoot"]

    def test_read_failure_is_empty_catalog(self, store):
        store.fail_on("fetch_rows", "schedule_templates")

        assert TemplateService.list_templates() == []

    def test_get_missing_template(self, store):
        with pytest.raises(TemplateNotFoundError):
            TemplateService.get_template("nope")

    def test_get_invalid_template(self, store):
        (row,) = store.seed(
            "schedule_templates",
            {"name": "Broken", "is_public": True, "template_data": [{"title": "No start"}]},
        )

        with pytest.raises(InvalidTemplateError):
            TemplateService.get_template(row["id"])


# =============================================================================
# apply_template
# =============================================================================

class TestApplyTemplate:
    def test_empty_schedule_seeded_without_confirm(self, store, production, template):
        items = TemplateService.apply_template(production["id"], template["id"])

        assert len(items) == 5
        assert [item.title for item in items][:2] == ["Crew Call", "Hair & Makeup"]
        assert sorted(item.sequence_order for item in items) == [0, 1, 2, 3, 4]
        assert ("delete_rows", "schedule_items") not in store.calls

    def test_existing_schedule_requires_confirm(self, store, production, template):
        store.seed(
            "schedule_items",
            {"production_id": production["id"], "title": "Old", "start_time": "08:00:00"},
        )

        with pytest.raises(TemplateConfirmationRequiredError) as exc_info:
            TemplateService.apply_template(production["id"], template["id"])

        assert exc_info.value.details["existing_count"] == 1
        assert [row["title"] for row in store.rows("schedule_items")] == ["Old"]

    def test_confirmed_apply_replaces_schedule(self, store, production, template):
        store.seed(
            "schedule_items",
            {"production_id": production["id"], "title": "Old", "start_time": "08:00:00"},
            {"production_id": "other", "title": "Keep", "start_time": "08:00:00"},
        )

        TemplateService.apply_template(production["id"], template["id"], confirm=True)

        mine = [r for r in store.rows("schedule_items") if r["production_id"] == production["id"]]
        assert len(mine) == 5
        assert "Old" not in [r["title"] for r in mine]
        assert any(r["title"] == "Keep" for r in store.rows("schedule_items"))

    def test_insert_failure_restores_previous_schedule(self, store, production, template):
        """Test that the old rows come back when the template insert fails."""
        # Arrange
        (old,) = store.seed(
            "schedule_items",
            {"production_id": production["id"], "title": "Old", "start_time": "08:00:00",
             "category": "general", "sequence_order": 0},
        )
        store.fail_on("insert_rows", "schedule_items")

        # Act
        with pytest.raises(TemplateApplyError) as exc_info:
            TemplateService.apply_template(production["id"], template["id"], confirm=True)

        # Assert
        assert exc_info.value.details["restored"] is True
        (row,) = store.rows("schedule_items")
        assert row["id"] == old["id"]
        assert row["title"] == "Old"

    def test_restore_failure_is_reported(self, store, production, template):
        store.seed(
            "schedule_items",
            {"production_id": production["id"], "title": "Old", "start_time": "08:00:00"},
        )
        store.fail_on("insert_rows", "schedule_items", call=1)
        store.fail_on("insert_rows", "schedule_items", call=2)

        with pytest.raises(TemplateApplyError) as exc_info:
            TemplateService.apply_template(production["id"], template["id"], confirm=True)

        assert exc_info.value.details["restored"] is False
        assert store.rows("schedule_items") == []

    def test_strict_read_failure_changes_nothing(self, store, production, template):
        store.seed(
            "schedule_items",
            {"production_id": production["id"], "title": "Old", "start_time": "08:00:00"},
        )
        store.fail_on("fetch_rows", "schedule_items")

        with pytest.raises(SupabaseClientError):
            TemplateService.apply_template(production["id"], template["id"], confirm=True)

        assert len(store.rows("schedule_items")) == 1
