# =============================================================================
# core/services/production_service.py - Production Business Logic
# =============================================================================
# Handles production CRUD operations and ownership checks.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from uuid import UUID

from lib.supabase_client import SupabaseClient
from lib.utils import normalize_uuid
from core.models.production import (
    Production,
    ProductionCreate,
    ProductionUpdate,
)
from app.exceptions import ProductionNotFoundError

logger = logging.getLogger(__name__)

TABLE = "productions"


class ProductionService:
    """
    Service for production management operations.

    Productions are never deleted here; child rows (schedule items, looks,
    crew) reference them by production_id.
    """

    @staticmethod
    def create_production(
        user_id: UUID | str,
        request: ProductionCreate,
    ) -> Production:
        """
        Create a new production owned by user_id.

        Args:
            user_id: The user who owns this production
            request: Validated name (trimmed) and optional shoot date

        Returns:
            The stored production

        Raises:
            SupabaseClientError: If the insert fails
        """
        data = request.model_dump(mode="json", exclude_none=True)
        data["user_id"] = normalize_uuid(user_id)

        try:
            rows = SupabaseClient.insert_rows(TABLE, [data])
        except Exception as e:
            logger.error(f"Failed to create production: {e}")
            raise

        production = Production(**rows[0])
        logger.info(f"Created production: {production.id} for user: {user_id}")
        return production

    @staticmethod
    def get_production(
        production_id: str | UUID,
        user_id: UUID | str | None = None,
    ) -> Production:
        """
        Get a production by ID.

        Args:
            production_id: The production UUID
            user_id: If provided, verify the production belongs to this user

        Returns:
            The production

        Raises:
            ProductionNotFoundError: If it doesn't exist or user doesn't own it
        """
        production_id_str = normalize_uuid(production_id)
        row = SupabaseClient.fetch_row(TABLE, production_id_str)

        if not row:
            raise ProductionNotFoundError(production_id_str)

        # Don't reveal that the production exists - return not found
        if user_id and str(row.get("user_id")) != str(user_id):
            raise ProductionNotFoundError(production_id_str)

        return Production(**row)

    @staticmethod
    def list_productions(user_id: UUID | str) -> list[Production]:
        """
        List a user's productions, newest first.

        A failed read is logged and shows as an empty dashboard.
        """
        try:
            rows = SupabaseClient.fetch_rows(
                TABLE,
                filters={"user_id": normalize_uuid(user_id)},
                order_by="created_at",
                ascending=False,
            )
        except Exception as e:
            logger.error(f"Error loading productions: {e}")
            return []

        return [Production(**row) for row in rows]

    @staticmethod
    def update_production(
        production_id: str | UUID,
        request: ProductionUpdate,
        user_id: UUID | str | None = None,
    ) -> Production:
        """
        Apply field-level edits to a production.

        Only the fields set on the request are written. Clearing a field is
        done by sending it as null.

        Args:
            production_id: The production UUID
            request: Fields to change
            user_id: If provided, verify the production belongs to this user

        Returns:
            The updated production

        Raises:
            ProductionNotFoundError: If it doesn't exist or user doesn't own it
            SupabaseClientError: If the update fails
        """
        production = ProductionService.get_production(production_id, user_id=user_id)

        update_data = request.model_dump(mode="json", exclude_unset=True)
        if not update_data:
            return production  # Nothing to update

        try:
            row = SupabaseClient.update_row(TABLE, production.id, update_data)
        except Exception as e:
            logger.error(f"Error updating production: {e}")
            raise

        if row is None:
            raise ProductionNotFoundError(production.id)

        logger.info(f"Updated production {production.id}: {sorted(update_data)}")
        return Production(**row)
