# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Back To One API:
# - test_ordering.py / test_formatting.py: Pure logic
# - test_models.py: Pydantic model validation
# - test_*_service.py: Services against the in-memory record store
# - test_pdf_renderer.py: Rasterizing and A4 pagination
# - test_api.py: HTTP endpoints through TestClient
#
# Run tests with: pytest
# =============================================================================
