# =============================================================================
# core/services/crew_service.py - Crew Member Operations
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient
from lib.utils import blank_to_none
from core.models.crew import CrewMember, CrewMemberCreate
from app.exceptions import CrewMemberNotFoundError

logger = logging.getLogger(__name__)

TABLE = "crew_members"


class CrewService:
    """Service for a production's crew list."""

    @staticmethod
    def list_crew(production_id: str) -> list[CrewMember]:
        """Crew ordered by role. A failed read is logged and returns []."""
        try:
            rows = SupabaseClient.fetch_rows(
                TABLE,
                filters={"production_id": production_id},
                order_by="role",
            )
        except Exception as e:
            logger.error(f"Error loading crew: {e}")
            return []

        return [CrewMember(**row) for row in rows]

    @staticmethod
    def add_member(production_id: str, request: CrewMemberCreate) -> CrewMember:
        """
        Add a crew member.

        Raises:
            SupabaseClientError: If the insert fails
        """
        data = {
            "production_id": production_id,
            "name": request.name,
            "role": request.role,
            "call_time": request.call_time.isoformat() if request.call_time else None,
            "phone": blank_to_none(request.phone),
            "email": blank_to_none(request.email),
            "notes": blank_to_none(request.notes),
        }

        try:
            rows = SupabaseClient.insert_rows(TABLE, [data])
        except Exception as e:
            logger.error(f"Error adding crew member: {e}")
            raise

        member = CrewMember(**rows[0])
        logger.info(f"Added crew member {member.id} ({member.role}) to production {production_id}")
        return member

    @staticmethod
    def remove_member(production_id: str, crew_id: str) -> None:
        """
        Raises:
            CrewMemberNotFoundError: If no member with that id belongs to the production
            SupabaseClientError: If the delete fails
        """
        try:
            deleted = SupabaseClient.delete_rows(
                TABLE, {"id": crew_id, "production_id": production_id}
            )
        except Exception as e:
            logger.error(f"Error removing crew member: {e}")
            raise

        if not deleted:
            raise CrewMemberNotFoundError(crew_id)
        logger.info(f"Removed crew member {crew_id}")
