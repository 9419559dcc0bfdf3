# =============================================================================
# core/services/look_service.py - Looks Gallery Operations
# =============================================================================
# Handles looks CRUD, reordering and image updates.
#
# Looks are kept in a strict 0-based order: new looks go after the highest
# sequence_order and moves swap exactly two neighbours.
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient
from lib.utils import clean_text
from core.models.look import Look, LookCreate, LookUpdate
from core.ordering import IndexChange, MoveDirection, move_item, next_sequence_index
from core.services.storage_service import StorageService
from app.exceptions import LookNotFoundError, ReorderError

logger = logging.getLogger(__name__)

TABLE = "looks"


class LookService:
    """Service for the looks gallery."""

    @staticmethod
    def list_looks(production_id: str, strict: bool = False) -> list[Look]:
        """
        Load a production's looks in gallery order.

        Args:
            production_id: The production UUID
            strict: Re-raise read failures instead of returning []
        """
        try:
            rows = SupabaseClient.fetch_rows(
                TABLE,
                filters={"production_id": production_id},
                order_by="sequence_order",
            )
        except Exception as e:
            logger.error(f"Error loading looks: {e}")
            if strict:
                raise
            return []

        logger.debug(f"Loaded {len(rows)} looks for production {production_id}")
        return [Look(**row) for row in rows]

    @staticmethod
    def get_look(production_id: str, look_id: str) -> Look:
        """
        Raises:
            LookNotFoundError: If the look doesn't belong to the production
        """
        row = SupabaseClient.fetch_row(TABLE, look_id)
        if not row or str(row.get("production_id")) != str(production_id):
            raise LookNotFoundError(look_id)
        return Look(**row)

    @staticmethod
    def create_look(production_id: str, request: LookCreate) -> Look:
        """
        Add a look at the end of the gallery.

        Raises:
            SupabaseClientError: If the insert fails
        """
        looks = LookService.list_looks(production_id, strict=True)

        data = {
            "production_id": production_id,
            "name": request.name,
            "description": "",
            "sequence_order": next_sequence_index(looks),
            "styling_notes": "",
        }

        try:
            rows = SupabaseClient.insert_rows(TABLE, [data])
        except Exception as e:
            logger.error(f"Error creating look: {e}")
            raise

        look = Look(**rows[0])
        logger.info(f"Created look {look.id} at position {look.sequence_order}")
        return look

    @staticmethod
    def update_look(production_id: str, look_id: str, request: LookUpdate) -> Look:
        """
        Apply field-level edits (name, description, styling notes, image URL).

        Raises:
            LookNotFoundError: If the look doesn't belong to the production
            SupabaseClientError: If the update fails
        """
        look = LookService.get_look(production_id, look_id)

        update_data = request.model_dump(exclude_unset=True)
        if "name" in update_data and update_data["name"] is not None:
            update_data["name"] = clean_text(update_data["name"])
        if not update_data:
            return look

        try:
            row = SupabaseClient.update_row(TABLE, look.id, update_data)
        except Exception as e:
            logger.error(f"Failed to update look {look.id}: {e}")
            raise

        if row is None:
            raise LookNotFoundError(look.id)

        logger.info(f"Updated look {look.id}: {sorted(update_data)}")
        return Look(**row)

    @staticmethod
    def upload_image(
        production_id: str,
        look_id: str,
        content: bytes,
        filename: str,
        content_type: str | None,
    ) -> Look:
        """
        Store a reference image and point the look at its public URL.

        Raises:
            LookNotFoundError: If the look doesn't belong to the production
            InvalidFileTypeError / FileTooLargeError: Rejected upload
            StorageUploadError: If the storage write fails
            SupabaseClientError: If saving the URL fails
        """
        look = LookService.get_look(production_id, look_id)

        image_url = StorageService.upload_look_image(
            production_id=production_id,
            look_id=look.id,
            content=content,
            filename=filename,
            content_type=content_type,
        )

        return LookService.update_look(
            production_id, look.id, LookUpdate(image_url=image_url)
        )

    @staticmethod
    def move_look(
        production_id: str,
        look_id: str,
        direction: MoveDirection,
    ) -> list[Look]:
        """
        Move a look one step up or down the gallery.

        Two writes are made, one per swapped look. If the second write
        fails the first is reverted before ReorderError is raised.

        Returns:
            The gallery in its new order (unchanged for a no-op move)

        Raises:
            LookNotFoundError: If the look isn't in the production's gallery
            ReorderError: If the new order could not be saved
        """
        direction = MoveDirection(direction)
        looks = LookService.list_looks(production_id, strict=True)

        index = next((i for i, look in enumerate(looks) if look.id == look_id), None)
        if index is None:
            raise LookNotFoundError(look_id)

        reordered, changes = move_item(looks, index, direction)
        if not changes:
            logger.debug(f"Look {look_id} is already at the {direction.value} end; nothing to move")
            return looks

        _persist_changes(changes)
        logger.info(f"Moved look {look_id} {direction.value} to position {changes[0].sequence_order}")
        return reordered

    @staticmethod
    def delete_look(production_id: str, look_id: str) -> None:
        """
        Delete one look. Remaining looks keep their sequence_order.

        Raises:
            LookNotFoundError: If no look with that id belongs to the production
            SupabaseClientError: If the delete fails
        """
        try:
            deleted = SupabaseClient.delete_rows(
                TABLE, {"id": look_id, "production_id": production_id}
            )
        except Exception as e:
            logger.error(f"Error deleting look: {e}")
            raise

        if not deleted:
            raise LookNotFoundError(look_id)
        logger.info(f"Deleted look {look_id}")


def _persist_changes(changes: list[IndexChange]) -> None:
    """
    Write each sequence_order change; undo earlier writes on failure.
    A write that matches no row counts as a failure.

    Raises:
        ReorderError: With reverted=False if an undo also failed
    """
    written: list[IndexChange] = []
    for change in changes:
        try:
            row = SupabaseClient.update_row(
                TABLE, change.record_id, {"sequence_order": change.sequence_order}
            )
            error = None if row else "look no longer exists"
        except Exception as e:
            error = str(e)

        if error:
            logger.error(f"Failed to save order for look {change.record_id}: {error}")
            reverted = _revert(written)
            raise ReorderError(change.record_id, error, reverted=reverted)
        written.append(change)


def _revert(written: list[IndexChange]) -> bool:
    reverted = True
    for change in reversed(written):
        try:
            SupabaseClient.update_row(
                TABLE, change.record_id, {"sequence_order": change.previous_order}
            )
        except Exception as e:
            logger.error(f"Failed to revert order for look {change.record_id}: {e}")
            reverted = False
    return reverted
