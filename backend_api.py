"""Backend API client for the storefront proxy routes."""

import json
import logging
import urllib.parse
from typing import Any, Optional

import httpx

from settings import get_settings

# Configure logging
logger = logging.getLogger("backend_api")

# Shared HTTP client for connection pooling
_client: Optional[httpx.AsyncClient] = None
_client_timeout: Optional[int] = None


class BackendAPIError(Exception):
    """Error from the backend API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def from_http_status(cls, status_code: int, body: str) -> "BackendAPIError":
        """Create error from a non-2xx backend response."""
        return cls(f"Backend API error ({status_code}): {body}", status_code=status_code)

    @classmethod
    def from_connection_error(cls, message: str) -> "BackendAPIError":
        """Create error from connection/timeout error (no response received)."""
        return cls(message, status_code=None)


async def get_client() -> httpx.AsyncClient:
    """Get or create the shared HTTP client."""
    global _client, _client_timeout
    s = get_settings()
    # Recreate client if timeout setting changed
    if _client is None or _client.is_closed or _client_timeout != s.backend_timeout:
        if _client is not None and not _client.is_closed:
            await _client.aclose()
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(s.backend_timeout),
            headers={"Content-Type": "application/json"},
            follow_redirects=True,
        )
        _client_timeout = s.backend_timeout
    return _client


async def close_client() -> None:
    """Close the shared HTTP client (called on shutdown)."""
    global _client, _client_timeout
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None
    _client_timeout = None


def _reject_constant(name: str) -> Any:
    """Reject NaN/Infinity, which are not valid JSON and cannot be re-rendered."""
    raise ValueError(f"Non-standard JSON constant: {name}")


def get_base_url() -> str:
    """Get the backend API base URL without a trailing slash."""
    return get_settings().backend_api_url.rstrip("/")


async def fetch_json(endpoint: str) -> Any:
    """Fetch JSON from a backend API endpoint.

    Performs a single GET request. Any failure (transport error, timeout,
    non-2xx status, undecodable body) is raised as BackendAPIError.
    """
    client = await get_client()
    url = f"{get_base_url()}{endpoint}"

    logger.info(f"[Backend] Request: {endpoint}")

    try:
        response = await client.get(url)
        response.raise_for_status()
        data = json.loads(response.text, parse_constant=_reject_constant)
    except httpx.HTTPStatusError as e:
        raise BackendAPIError.from_http_status(e.response.status_code, e.response.text[:200])
    except httpx.TimeoutException as e:
        raise BackendAPIError.from_connection_error(f"Timeout fetching {url}: {e}")
    except httpx.RequestError as e:
        raise BackendAPIError.from_connection_error(f"Request to {url} failed: {e}")
    except ValueError as e:
        raise BackendAPIError(f"Invalid JSON from {url}: {e}")

    logger.info(f"[Backend] Success: {endpoint} ({response.status_code})")
    return data


async def get_categories() -> Any:
    """Get all categories."""
    return await fetch_json("/categories")


async def get_category(category_id: str) -> Any:
    """Get a single category by ID."""
    encoded_id = urllib.parse.quote(category_id)
    return await fetch_json(f"/categories/{encoded_id}")


async def get_products(search: Optional[str] = None, category: Optional[str] = None) -> Any:
    """Get products, optionally filtered by search term and category name.

    Only non-empty filters are forwarded, search first.
    """
    query_parts = []
    if search:
        query_parts.append(f"search={urllib.parse.quote(search, safe='')}")
    if category:
        query_parts.append(f"category={urllib.parse.quote(category, safe='')}")

    endpoint = "/products"
    if query_parts:
        endpoint += "?" + "&".join(query_parts)
    return await fetch_json(endpoint)


async def get_product(product_id: str) -> Any:
    """Get a single product by ID."""
    encoded_id = urllib.parse.quote(product_id)
    return await fetch_json(f"/products/{encoded_id}")


async def get_guides() -> Any:
    """Get published guides (the backend only returns published ones without auth)."""
    return await fetch_json("/guides")
