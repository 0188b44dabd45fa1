"""Runtime settings built from the startup configuration."""

import logging
from typing import Optional

from pydantic import BaseModel, Field

import config

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Runtime application settings."""

    # Backend API
    backend_api_url: str = Field(default="http://localhost:3001/api/v1")
    backend_timeout: int = Field(default=10, ge=1, le=120)


# In-memory cached settings
_cached_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get current settings (cached in memory)."""
    global _cached_settings
    if _cached_settings is None:
        _cached_settings = load_settings()
    return _cached_settings


def load_settings() -> Settings:
    """Load settings from the environment-backed config module."""
    settings = Settings(
        backend_api_url=config.BACKEND_API_URL,
        backend_timeout=config.BACKEND_TIMEOUT,
    )
    logger.info(f"Settings loaded: backend={settings.backend_api_url}, timeout={settings.backend_timeout}s")
    return settings


def invalidate_cache() -> None:
    """Force reload settings on next access."""
    global _cached_settings
    _cached_settings = None
