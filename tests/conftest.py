"""Shared test fixtures for Storefront Proxy tests."""

import os

# Add project root to path
import sys
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


# =============================================================================
# Sample Backend Payloads
# =============================================================================


@pytest.fixture
def sample_categories():
    """Sample backend categories list."""
    return [
        {"id": 42, "name": "Books", "slug": "books"},
        {"id": 43, "name": "Computer Peripherals", "slug": "computer-peripherals"},
    ]


@pytest.fixture
def sample_category():
    """Sample backend category."""
    return {"id": 42, "name": "Books"}


@pytest.fixture
def sample_product():
    """Sample backend product."""
    return {
        "id": 7,
        "name": "Mechanical Keyboard",
        "price": 89.99,
        "category": {"id": 43, "name": "Computer Peripherals"},
    }


@pytest.fixture
def sample_guides():
    """Sample backend published guides list."""
    return [
        {
            "id": 1,
            "slug": "best-keyboards",
            "title": "Best Keyboards",
            "category": {"id": 43, "slug": "computer-peripherals"},
        },
        {
            "id": 2,
            "slug": "summer-reading",
            "title": "Summer Reading",
            "category": {"id": 42, "slug": "books"},
        },
        {"id": 3, "slug": "uncategorized-tips", "title": "Tips", "category": None},
    ]


# =============================================================================
# Mock Backend Fixtures
# =============================================================================


@pytest.fixture
def mock_backend():
    """Mock backend_api.fetch_json.

    Tests set `return_value` or `side_effect` and inspect `call_args` to
    check which backend endpoint was requested.
    """
    with patch("backend_api.fetch_json", new_callable=AsyncMock) as mock_fetch:
        yield mock_fetch


# =============================================================================
# FastAPI TestClient Fixtures
# =============================================================================


@pytest.fixture
def test_settings(monkeypatch):
    """Override settings for tests."""
    import settings
    from settings import Settings

    test_settings = Settings(
        backend_api_url="https://backend.example.com/api/v1",
        backend_timeout=5,
    )
    monkeypatch.setattr(settings, "_cached_settings", test_settings)
    yield test_settings


@pytest.fixture
def app_no_lifespan(test_settings):
    """Create FastAPI app without lifespan events."""
    from fastapi import FastAPI

    from routers import categories, guides, products

    app = FastAPI()

    app.include_router(categories.router, prefix="/api")
    app.include_router(products.router, prefix="/api")
    app.include_router(guides.router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


@pytest.fixture
def test_client(app_no_lifespan):
    """FastAPI TestClient for the storefront routes."""
    with TestClient(app_no_lifespan) as client:
        yield client

