"""Configuration for Storefront Proxy.

Startup-only settings are configured here via environment variables.
Runtime settings derived from them live in settings.py.
"""

import os

# Server settings (startup-only)
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

# Prefix for the public storefront routes (e.g. /api/categories)
API_PREFIX = os.getenv("API_PREFIX", "/api")

# Backend API that owns category/product/guide data
BACKEND_API_URL = os.getenv("BACKEND_API_URL", "http://localhost:3001/api/v1")

# Timeout (seconds) for a single backend request
BACKEND_TIMEOUT = int(os.getenv("BACKEND_TIMEOUT", "10"))

# CORS settings
# Comma-separated list of allowed origins (e.g., "https://shop.example.com,https://admin.example.com")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "")

# Allow all origins (development mode) - credentials will be DISABLED in this mode
CORS_ALLOW_ALL = os.getenv("CORS_ALLOW_ALL", "false").lower() in ("true", "1", "yes")

# Allow credentials (cookies, authorization headers) - only works with specific origins
CORS_ALLOW_CREDENTIALS = os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() in ("true", "1", "yes")

# Debug mode (enables auto-reload in development)
DEBUG = os.getenv("DEBUG", "false").lower() in ("true", "1", "yes")
