# =============================================================================
# lib/supabase_client.py - Supabase Record Store Gateway
# =============================================================================
# This module provides a typed wrapper for Supabase table operations.
# It implements the singleton pattern to reuse a single client connection
# and exposes one generic contract for every collection the service uses:
# - productions, schedule_items, schedule_templates, looks, crew_members
#
# Per table it supports:
# - select with equality filters and a single ascending/descending order
# - insert of one or more rows, returning the inserted rows
# - update of a set of fields on the row matching an identity
# - delete of rows matching an identity or a parent (bulk)
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   looks = SupabaseClient.fetch_rows(
#       "looks", filters={"production_id": pid}, order_by="sequence_order"
#   )
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST error code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase table operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # Fetch a production's crew ordered by role
        crew = SupabaseClient.fetch_rows(
            "crew_members",
            filters={"production_id": "550e8400-..."},
            order_by="role",
        )

        # Update one field on one look
        SupabaseClient.update_row("looks", look_id, {"image_url": url})
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Ownership checks are done by the service layer instead.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _normalize_uuid(cls, uuid_value: str | UUID) -> str:
        """Convert UUID to string for queries."""
        return str(uuid_value) if isinstance(uuid_value, UUID) else uuid_value

    @classmethod
    def _apply_filters(cls, query: Any, filters: dict[str, Any] | None) -> Any:
        """Chain one .eq() per filter; UUID values are stringified."""
        for column, value in (filters or {}).items():
            if isinstance(value, UUID):
                value = str(value)
            query = query.eq(column, value)
        return query

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
        columns: str = "*",
    ) -> list[dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table: Table name (e.g. "looks")
            filters: Equality filters, column -> value
            order_by: Column to order by (optional)
            ascending: Sort direction for order_by
            columns: PostgREST column list (default: all)

        Returns:
            List of row dicts (empty if nothing matches)

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()

        try:
            query = client.table(table).select(columns)
            query = cls._apply_filters(query, filters)
            if order_by:
                query = query.order(order_by, desc=not ascending)

            response = query.execute()
            rows = response.data or []

            logger.debug(f"Fetched {len(rows)} rows from {table}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch rows from {table}: {e}",
                code="FETCH_ROWS_FAILED",
                suggestion=f"Check that the {table} table exists and is accessible",
                details={"table": table, "filters": {k: str(v) for k, v in (filters or {}).items()}}
            )

    @classmethod
    def fetch_row(
        cls,
        table: str,
        row_id: str | UUID,
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row by ID.

        Args:
            table: Table name
            row_id: The row UUID
            columns: PostgREST column list (default: all)

        Returns:
            Row dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        row_id_str = cls._normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .select(columns)
                .eq("id", row_id_str)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            # Check if it's a "not found" error
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch row from {table}: {e}",
                code="FETCH_ROW_FAILED",
                suggestion="Check that the id is correct",
                details={"table": table, "id": row_id_str}
            )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert_rows(
        cls,
        table: str,
        rows: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """
        Insert one or more rows.

        Args:
            table: Table name
            rows: Row dicts to insert (JSON-serializable values)

        Returns:
            Inserted rows with generated id and created_at

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        if not rows:
            return []

        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .insert(rows)
                .execute()
            )

            if response.data:
                logger.debug(f"Inserted {len(response.data)} rows into {table}")
                return response.data
            raise SupabaseClientError(
                message=f"Insert into {table} returned no data",
                code="INSERT_NO_DATA",
                details={"table": table, "row_count": len(rows)}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                suggestion="Check that required columns are present and values match the column types",
                details={"table": table, "row_count": len(rows)}
            )

    @classmethod
    def update_row(
        cls,
        table: str,
        row_id: str | UUID,
        values: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Update a set of fields on the row with the given ID.

        Args:
            table: Table name
            row_id: The row UUID
            values: Column -> new value

        Returns:
            Updated row dict, or None if no row matched

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()
        row_id_str = cls._normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .update(values)
                .eq("id", row_id_str)
                .execute()
            )

            if response.data:
                return response.data[0]
            return None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update row in {table}: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "id": row_id_str, "fields": sorted(values)}
            )

    @classmethod
    def delete_rows(
        cls,
        table: str,
        filters: dict[str, Any],
    ) -> int:
        """
        Delete rows matching equality filters.

        Filters are required: use {"id": ...} for one row or
        {"production_id": ...} to clear a production's children.

        Args:
            table: Table name
            filters: Equality filters, column -> value

        Returns:
            Number of rows deleted

        Raises:
            ValueError: If filters is empty
            SupabaseClientError: If delete fails
        """
        if not filters:
            raise ValueError("delete_rows requires at least one filter")

        client = cls.get_client()

        try:
            query = client.table(table).delete()
            query = cls._apply_filters(query, filters)
            response = query.execute()

            deleted = len(response.data or [])
            logger.debug(f"Deleted {deleted} rows from {table}")
            return deleted

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                details={"table": table, "filters": {k: str(v) for k, v in filters.items()}}
            )
