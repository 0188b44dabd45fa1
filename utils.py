"""Utility functions for Storefront Proxy."""

from typing import Any

from fastapi.responses import JSONResponse

# Cache-Control presets for successful storefront responses
CATEGORIES_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"
PRODUCTS_CACHE_CONTROL = "public, s-maxage=120, stale-while-revalidate=240"
GUIDES_CACHE_CONTROL = "public, s-maxage=180, stale-while-revalidate=360"


def cached_json(payload: Any, cache_control: str) -> JSONResponse:
    """Wrap a backend payload in a 200 JSON response with a Cache-Control header."""
    return JSONResponse(content=payload, headers={"Cache-Control": cache_control})


def error_json(message: str, status_code: int) -> JSONResponse:
    """Build the fixed-shape error response: {"error": message}."""
    return JSONResponse(content={"error": message}, status_code=status_code)
