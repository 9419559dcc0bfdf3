# =============================================================================
# core/services/schedule_service.py - Schedule Item Operations
# =============================================================================
# Handles the schedule builder's items: listing by start time, adding by
# hand, deleting, and the timeline view with labels and summary counts.
# Template expansion lives in template_service.py.
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient
from lib.utils import blank_to_none, clean_text
from core.models.schedule import (
    ScheduleCategory,
    ScheduleItem,
    ScheduleItemCreate,
    ScheduleItemView,
    ScheduleSummary,
    ScheduleView,
)
from core.ordering import next_sequence_index
from app.exceptions import ScheduleItemNotFoundError

logger = logging.getLogger(__name__)

TABLE = "schedule_items"


class ScheduleService:
    """Service for schedule item management."""

    @staticmethod
    def list_items(production_id: str, strict: bool = False) -> list[ScheduleItem]:
        """
        Load a production's schedule ordered by start time.

        Args:
            production_id: The production UUID
            strict: Re-raise read failures instead of returning []. Used
                before destructive operations, where "no data" would be
                the wrong answer.

        Returns:
            Schedule items, earliest first
        """
        try:
            rows = SupabaseClient.fetch_rows(
                TABLE,
                filters={"production_id": production_id},
                order_by="start_time",
            )
        except Exception as e:
            logger.error(f"Error loading schedule: {e}")
            if strict:
                raise
            return []

        return [ScheduleItem(**row) for row in rows]

    @staticmethod
    def get_view(production_id: str) -> ScheduleView:
        """Timeline for display: labelled items plus category counts."""
        items = ScheduleService.list_items(production_id)
        return ScheduleView(
            production_id=production_id,
            items=[ScheduleItemView.from_item(item) for item in items],
            summary=summarize(items),
        )

    @staticmethod
    def add_item(production_id: str, request: ScheduleItemCreate) -> ScheduleItem:
        """
        Add a schedule item by hand.

        The item is appended after the current highest sequence_order.

        Raises:
            SupabaseClientError: If the schedule read or the insert fails
        """
        existing = ScheduleService.list_items(production_id, strict=True)

        data = {
            "production_id": production_id,
            "title": request.title,
            "description": clean_text(request.description),
            "start_time": request.start_time.isoformat(),
            "end_time": request.end_time.isoformat() if request.end_time else None,
            "category": request.category.value,
            "location": blank_to_none(request.location),
            "notes": blank_to_none(request.notes),
            "sequence_order": next_sequence_index(existing),
        }

        try:
            rows = SupabaseClient.insert_rows(TABLE, [data])
        except Exception as e:
            logger.error(f"Error adding schedule item: {e}")
            raise

        item = ScheduleItem(**rows[0])
        logger.info(f"Added schedule item {item.id} to production {production_id}")
        return item

    @staticmethod
    def delete_item(production_id: str, item_id: str) -> None:
        """
        Delete one schedule item.

        Raises:
            ScheduleItemNotFoundError: If no item with that id belongs to the production
            SupabaseClientError: If the delete fails
        """
        try:
            deleted = SupabaseClient.delete_rows(
                TABLE, {"id": item_id, "production_id": production_id}
            )
        except Exception as e:
            logger.error(f"Error deleting schedule item: {e}")
            raise

        if not deleted:
            raise ScheduleItemNotFoundError(item_id)
        logger.info(f"Deleted schedule item {item_id}")


def summarize(items: list[ScheduleItem]) -> ScheduleSummary:
    """Count setup items, shoot blocks and breaks."""
    def count(category: ScheduleCategory) -> int:
        return sum(1 for item in items if item.category == category)

    return ScheduleSummary(
        setup_items=count(ScheduleCategory.SETUP),
        shoot_blocks=count(ScheduleCategory.SHOOT),
        breaks=count(ScheduleCategory.BREAK),
        total_items=len(items),
    )
