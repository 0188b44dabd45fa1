"""Storefront Proxy - public storefront API backed by the private backend API."""

import logging
import os
import platform
import sys
from contextlib import asynccontextmanager
from typing import List, Optional, Tuple

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

import backend_api
import config
from routers import categories, guides, products
from settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Proxying storefront routes at {config.API_PREFIX} to {get_settings().backend_api_url}")
    yield
    # Shutdown: Release pooled backend connections
    await backend_api.close_client()


app = FastAPI(
    title="Storefront Proxy",
    description="Public storefront API that forwards to the backend API with cache headers",
    version="1.0.0",
    lifespan=lifespan,
)


def cors_policy() -> Optional[Tuple[List[str], bool]]:
    """Resolve the CORS origins and credentials flag from config.

    Returns None when cross-origin requests should not be allowed at all.
    CORS_ORIGINS wins over CORS_ALLOW_ALL; the wildcard never carries credentials.
    """
    origins = [o.strip() for o in config.CORS_ORIGINS.split(",") if o.strip()]
    if origins:
        return origins, config.CORS_ALLOW_CREDENTIALS
    if config.CORS_ALLOW_ALL:
        return ["*"], False
    return None


def configure_cors(app: FastAPI) -> None:
    """Add CORSMiddleware for GET-only storefront access, if configured."""
    policy = cors_policy()
    if policy is None:
        logger.info("CORS not configured - cross-origin requests will be blocked")
        return

    origins, allow_credentials = policy
    if origins == ["*"]:
        logger.warning("CORS allows ALL origins without credentials; set CORS_ORIGINS for production use")
    else:
        logger.info(f"CORS origins: {origins}, credentials: {allow_credentials}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )


configure_cors(app)

# Headers stamped on every response, including proxied errors
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Apply SECURITY_HEADERS to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response


app.add_middleware(SecurityHeadersMiddleware)

# Mount storefront routers
app.include_router(categories.router, prefix=config.API_PREFIX)
app.include_router(products.router, prefix=config.API_PREFIX)
app.include_router(guides.router, prefix=config.API_PREFIX)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


def get_server_version() -> str:
    """Get server version from VERSION file, optionally with git hash suffix."""
    try:
        with open("VERSION") as f:
            base_version = f.read().strip()
    except FileNotFoundError:
        base_version = "unknown"

    git_hash = os.environ.get("GIT_VERSION", "")
    return f"{base_version}-{git_hash}" if git_hash else base_version


@app.get("/info")
async def info():
    """Server info with package versions and backend configuration."""
    s = get_settings()

    import importlib.metadata

    packages = {}
    for pkg in ["fastapi", "uvicorn", "httpx", "pydantic"]:
        try:
            packages[pkg] = importlib.metadata.version(pkg)
        except importlib.metadata.PackageNotFoundError:
            packages[pkg] = "not installed"

    return {
        "name": "Storefront Proxy",
        "version": get_server_version(),
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "packages": packages,
        "config": {
            "api_prefix": config.API_PREFIX,
            "backend_api_url": s.backend_api_url,
            "backend_timeout": s.backend_timeout,
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server:app", host=config.HOST, port=config.PORT, reload=config.DEBUG)
