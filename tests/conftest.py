# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - FakeRecordStore: an in-memory stand-in for SupabaseClient, patched into
#   every service module, with per-call failure injection
# - An authenticated TestClient for the HTTP layer
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import copy
from collections import defaultdict
from contextlib import ExitStack
from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock, patch
from uuid import UUID, uuid4

import pytest

from lib.supabase_client import SupabaseClientError

# Modules that hold their own reference to SupabaseClient
SERVICE_MODULES = [
    "core.services.production_service",
    "core.services.schedule_service",
    "core.services.template_service",
    "core.services.look_service",
    "core.services.crew_service",
    "core.services.storage_service",
    "app.routers.health",
]

USER_ID = UUID("11111111-1111-1111-1111-111111111111")
OTHER_USER_ID = UUID("22222222-2222-2222-2222-222222222222")

PUBLIC_IMAGE_URL = "https://test-project.supabase.co/storage/v1/object/public/look-images/look.jpg"


# =============================================================================
# Fake Record Store
# =============================================================================

class FakeRecordStore:
    """
    In-memory implementation of the SupabaseClient table methods.

    Rows are plain dicts keyed by table name. Failures are injected per
    (method, table) with fail_on(); each injected failure raises
    SupabaseClientError exactly like the real gateway would.
    """

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self.calls: list[tuple[str, str]] = []
        self._failures: dict[tuple[str, str], list[int]] = {}

        # Storage bucket used by StorageService
        self.client = MagicMock()
        bucket = self.client.storage.from_.return_value
        bucket.get_public_url.return_value = PUBLIC_IMAGE_URL

    # -- test helpers ---------------------------------------------------------

    def seed(self, table: str, *rows: dict[str, Any]) -> list[dict[str, Any]]:
        """Add rows directly, filling in id and created_at."""
        stored = [self._stamp(row) for row in rows]
        self.tables[table].extend(stored)
        return [dict(row) for row in stored]

    def rows(self, table: str) -> list[dict[str, Any]]:
        return [dict(row) for row in self.tables[table]]

    def fail_on(self, method: str, table: str, call: int = 1) -> None:
        """Make the n-th (1-based) future call of method on table fail."""
        target = self.calls.count((method, table)) + call
        self._failures.setdefault((method, table), []).append(target)

    def _stamp(self, row: dict[str, Any]) -> dict[str, Any]:
        row = copy.deepcopy(row)
        row.setdefault("id", str(uuid4()))
        row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        return row

    def _record(self, method: str, table: str) -> None:
        self.calls.append((method, table))
        count = self.calls.count((method, table))
        pending = self._failures.get((method, table), [])
        if count in pending:
            pending.remove(count)
            raise SupabaseClientError(
                message=f"Simulated {method} failure on {table}",
                code="SIMULATED_FAILURE",
            )

    @staticmethod
    def _matches(row: dict[str, Any], filters: dict[str, Any] | None) -> bool:
        return all(str(row.get(k)) == str(v) for k, v in (filters or {}).items())

    # -- SupabaseClient interface --------------------------------------------

    def get_client(self):
        return self.client

    def fetch_rows(self, table, filters=None, order_by=None, ascending=True, columns="*"):
        self._record("fetch_rows", table)
        rows = [dict(r) for r in self.tables[table] if self._matches(r, filters)]
        if order_by:
            rows.sort(key=lambda r: (r.get(order_by) is None, r.get(order_by)))
            if not ascending:
                rows.reverse()
        return rows

    def fetch_row(self, table, row_id, columns="*"):
        self._record("fetch_row", table)
        for row in self.tables[table]:
            if str(row["id"]) == str(row_id):
                return dict(row)
        return None

    def insert_rows(self, table, rows):
        self._record("insert_rows", table)
        if not rows:
            return []
        stored = [self._stamp(row) for row in rows]
        self.tables[table].extend(stored)
        return [dict(row) for row in stored]

    def update_row(self, table, row_id, values):
        self._record("update_row", table)
        for row in self.tables[table]:
            if str(row["id"]) == str(row_id):
                row.update(copy.deepcopy(values))
                return dict(row)
        return None

    def delete_rows(self, table, filters):
        self._record("delete_rows", table)
        if not filters:
            raise ValueError("delete_rows requires at least one filter")
        keep = [r for r in self.tables[table] if not self._matches(r, filters)]
        deleted = len(self.tables[table]) - len(keep)
        self.tables[table] = keep
        return deleted


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """FakeRecordStore patched in place of SupabaseClient in all services."""
    fake = FakeRecordStore()
    with ExitStack() as stack:
        for module in SERVICE_MODULES:
            stack.enter_context(patch(f"{module}.SupabaseClient", fake))
        yield fake


@pytest.fixture
def user():
    """The authenticated caller."""
    from app.auth import AuthUser

    return AuthUser(id=USER_ID, email="producer@example.com")


@pytest.fixture
def production(store):
    """A production owned by the test user, with every call-sheet field empty."""
    (row,) = store.seed(
        "productions",
        {"name": "Spring Denim Lookbook", "user_id": str(USER_ID)},
    )
    return row


@pytest.fixture
def template_rows():
    """Blueprint JSON as stored in schedule_templates.template_data."""
    return [
        {"title": "Crew Call", "start_time": "07:00", "category": "setup"},
        {"title": "Hair & Makeup", "start_time": "07:30", "end_time": "09:00", "category": "prep"},
        {"title": "Shoot Block 1", "start_time": "09:00", "end_time": "12:00", "category": "shoot",
         "location": "Studio A"},
        {"title": "Lunch", "start_time": "12:00", "end_time": "12:30", "category": "break"},
        {"title": "Wrap", "start_time": "17:00", "description": "Strike set"},
    ]


@pytest.fixture
def template(store, template_rows):
    """A public schedule template with five blueprints."""
    (row,) = store.seed(
        "schedule_templates",
        {
            "name": "Full Day Shoot",
            "description": "Standard 10-hour day",
            "is_public": True,
            "template_data": template_rows,
        },
    )
    return row


@pytest.fixture
def client(store, user):
    """TestClient with authentication overridden to the test user."""
    from fastapi.testclient import TestClient

    from app.auth import get_current_user
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
