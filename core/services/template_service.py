# =============================================================================
# core/services/template_service.py - Schedule Template Expansion
# =============================================================================
# Loads the public template catalog and materializes a template into a
# production's schedule.
#
# Apply flow:
# 1. Load template (blueprints already validated) and the current schedule
# 2. Non-empty schedule without confirm -> TemplateConfirmationRequiredError
# 3. Delete the production's schedule items (bulk, by production_id)
# 4. Insert one item per blueprint, sequence_order = blueprint position
# 5. Insert failed after a delete -> re-insert the old rows (compensation)
#
# PostgREST gives the client no multi-statement transaction, so steps 3-4
# are guarded by the compensating insert in step 5 instead.
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from lib.supabase_client import SupabaseClient
from core.models.schedule import (
    ScheduleCategory,
    ScheduleItem,
    ScheduleTemplate,
    TemplateBlueprint,
)
from core.services.schedule_service import ScheduleService, TABLE as SCHEDULE_TABLE
from app.exceptions import (
    InvalidTemplateError,
    TemplateApplyError,
    TemplateConfirmationRequiredError,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)

TABLE = "schedule_templates"


def expand_blueprints(
    blueprints: list[TemplateBlueprint],
    production_id: str,
) -> list[dict[str, Any]]:
    """
    Map blueprints 1:1 to schedule_items rows.

    title and start_time pass through; description defaults to "",
    category to general, and the other optional fields to null.
    sequence_order is the blueprint's 0-based position.
    """
    return [
        {
            "production_id": production_id,
            "title": blueprint.title,
            "description": blueprint.description or "",
            "start_time": blueprint.start_time.isoformat(),
            "end_time": blueprint.end_time.isoformat() if blueprint.end_time else None,
            "category": (blueprint.category or ScheduleCategory.GENERAL).value,
            "location": blueprint.location,
            "notes": blueprint.notes,
            "sequence_order": index,
        }
        for index, blueprint in enumerate(blueprints)
    ]


class TemplateService:
    """Service for the schedule template catalog and template expansion."""

    @staticmethod
    def list_templates() -> list[ScheduleTemplate]:
        """
        Load public templates.

        Templates whose blueprints don't validate are skipped with a
        warning. A failed read is logged and returns an empty catalog.
        """
        try:
            rows = SupabaseClient.fetch_rows(
                TABLE,
                filters={"is_public": True},
                order_by="name",
            )
        except Exception as e:
            logger.error(f"Error loading templates: {e}")
            return []

        templates = []
        for row in rows:
            try:
                templates.append(ScheduleTemplate.from_db_row(row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid schedule template {row.get('id')}: {e}")
        return templates

    @staticmethod
    def get_template(template_id: str) -> ScheduleTemplate:
        """
        Load one public template.

        Raises:
            TemplateNotFoundError: If missing or not public
            InvalidTemplateError: If its blueprints don't validate
        """
        row = SupabaseClient.fetch_row(TABLE, template_id)
        if not row or not row.get("is_public", True):
            raise TemplateNotFoundError(template_id)

        try:
            return ScheduleTemplate.from_db_row(row)
        except ValidationError as e:
            raise InvalidTemplateError(template_id, str(e))

    @staticmethod
    def apply_template(
        production_id: str,
        template_id: str,
        confirm: bool = False,
    ) -> list[ScheduleItem]:
        """
        Replace (or seed) a production's schedule from a template.

        Args:
            production_id: The production UUID
            template_id: The template UUID
            confirm: Must be True when the schedule already has items

        Returns:
            The new schedule, earliest start time first

        Raises:
            TemplateNotFoundError / InvalidTemplateError: Bad template
            TemplateConfirmationRequiredError: Existing items and no confirm
            SupabaseClientError: Reading or clearing the schedule failed
                (nothing was changed)
            TemplateApplyError: Inserting the template items failed
        """
        template = TemplateService.get_template(template_id)
        current = ScheduleService.list_items(production_id, strict=True)

        if current and not confirm:
            raise TemplateConfirmationRequiredError(production_id, len(current))

        if current:
            try:
                SupabaseClient.delete_rows(SCHEDULE_TABLE, {"production_id": production_id})
            except Exception as e:
                logger.error(f"Error clearing schedule for template: {e}")
                raise

        rows = expand_blueprints(template.blueprints, production_id)

        try:
            inserted = SupabaseClient.insert_rows(SCHEDULE_TABLE, rows)
        except Exception as e:
            logger.error(f"Error applying template: {e}")
            restored = TemplateService._restore(production_id, current)
            raise TemplateApplyError(production_id, str(e), restored=restored)

        logger.info(
            f"Applied template {template.id} to production {production_id}: "
            f"{len(inserted)} items (replaced {len(current)})"
        )
        items = [ScheduleItem(**row) for row in inserted]
        return sorted(items, key=lambda item: item.start_time)

    @staticmethod
    def _restore(production_id: str, previous: list[ScheduleItem]) -> bool:
        """Re-insert the rows removed before a failed apply."""
        if not previous:
            return True

        try:
            SupabaseClient.insert_rows(
                SCHEDULE_TABLE,
                [item.model_dump(mode="json") for item in previous],
            )
        except Exception as e:
            logger.error(
                f"Failed to restore {len(previous)} schedule items for "
                f"production {production_id}: {e}"
            )
            return False

        logger.warning(f"Restored previous schedule for production {production_id}")
        return True
