"""Product endpoints - proxied to the backend API."""

import logging
from typing import Optional

from fastapi import APIRouter, Query

import backend_api
from models import error_responses
from utils import PRODUCTS_CACHE_CONTROL, cached_json, error_json

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products", responses=error_responses(500))
async def list_products(
    search: Optional[str] = Query(None, description="Free-text search term"),
    category: Optional[str] = Query(None, description="Category name to filter by"),
):
    """Fetch products for public display, optionally filtered."""
    try:
        products = await backend_api.get_products(search=search, category=category)
    except backend_api.BackendAPIError as e:
        logger.warning(f"[Products] Error fetching products (search={search!r}, category={category!r}): {e}")
        return error_json("Failed to fetch products", 500)

    return cached_json(products, PRODUCTS_CACHE_CONTROL)


@router.get("/products/{product_id}", responses=error_responses(404))
async def get_product(product_id: str):
    """Fetch a single product by ID."""
    try:
        product = await backend_api.get_product(product_id)
    except backend_api.BackendAPIError as e:
        logger.warning(f"[Products] Error fetching product {product_id}: {e}")
        return error_json("Product not found", 404)

    return cached_json(product, PRODUCTS_CACHE_CONTROL)
