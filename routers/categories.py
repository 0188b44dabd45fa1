"""Category endpoints - proxied to the backend API."""

import logging

from fastapi import APIRouter

import backend_api
from models import error_responses
from utils import CATEGORIES_CACHE_CONTROL, cached_json, error_json

logger = logging.getLogger(__name__)

router = APIRouter(tags=["categories"])


@router.get("/categories", responses=error_responses(500))
async def list_categories():
    """Fetch all categories for public display."""
    try:
        categories = await backend_api.get_categories()
    except backend_api.BackendAPIError as e:
        logger.warning(f"[Categories] Error fetching categories: {e}")
        return error_json("Failed to fetch categories", 500)

    return cached_json(categories, CATEGORIES_CACHE_CONTROL)


@router.get("/categories/{category_id}", responses=error_responses(404))
async def get_category(category_id: str):
    """Fetch a single category by ID.

    Any backend failure is reported as 404, whatever its cause.
    """
    try:
        category = await backend_api.get_category(category_id)
    except backend_api.BackendAPIError as e:
        logger.warning(f"[Categories] Error fetching category {category_id}: {e}")
        return error_json("Category not found", 404)

    return cached_json(category, CATEGORIES_CACHE_CONTROL)
