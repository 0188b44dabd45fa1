"""Guide endpoints - proxied to the backend API.

The backend has no published-guide lookup by slug, so both endpoints fetch
the full published list and filter it here.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Query

import backend_api
from models import error_responses
from utils import GUIDES_CACHE_CONTROL, cached_json, error_json

logger = logging.getLogger(__name__)

router = APIRouter(tags=["guides"])


def _category_slug(guide: Any) -> Optional[str]:
    if not isinstance(guide, dict):
        return None
    category = guide.get("category")
    if not isinstance(category, dict):
        return None
    return category.get("slug")


def filter_by_category(guides: Any, category_slug: Optional[str]) -> Any:
    """Keep only guides whose category slug matches.

    Returns the payload untouched when no slug is given. Raises ValueError
    when a slug is given but the payload is not a list.
    """
    if not category_slug:
        return guides
    if not isinstance(guides, list):
        raise ValueError(f"Expected a list of guides, got {type(guides).__name__}")
    return [g for g in guides if _category_slug(g) == category_slug]


def find_by_slug(guides: Any, slug: str) -> Optional[dict]:
    """Return the first guide with the given slug, or None.

    Raises ValueError when the payload is not a list.
    """
    if not isinstance(guides, list):
        raise ValueError(f"Expected a list of guides, got {type(guides).__name__}")
    for guide in guides:
        if isinstance(guide, dict) and guide.get("slug") == slug:
            return guide
    return None


@router.get("/guides", responses=error_responses(500))
async def list_guides(category: Optional[str] = Query(None, description="Category slug to filter by")):
    """Fetch published guides for public display."""
    try:
        guides = await backend_api.get_guides()
        filtered = filter_by_category(guides, category)
    except (backend_api.BackendAPIError, ValueError) as e:
        logger.warning(f"[Guides] Error fetching guides (category={category!r}): {e}")
        return error_json("Failed to fetch guides", 500)

    return cached_json(filtered, GUIDES_CACHE_CONTROL)


@router.get("/guides/{slug}", responses=error_responses(404))
async def get_guide(slug: str):
    """Fetch a single published guide by slug."""
    try:
        guides = await backend_api.get_guides()
        guide = find_by_slug(guides, slug)
    except (backend_api.BackendAPIError, ValueError) as e:
        logger.warning(f"[Guides] Error fetching guide {slug}: {e}")
        return error_json("Guide not found", 404)

    if guide is None:
        return error_json("Guide not found", 404)

    return cached_json(guide, GUIDES_CACHE_CONTROL)
