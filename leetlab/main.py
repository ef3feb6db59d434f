# =============================================================================
# leetlab/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the LeetLab API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn leetlab.main:app --reload
#   leetlab-server
# =============================================================================

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.responses import PlainTextResponse

from leetlab import __version__
from leetlab.config import Settings, get_settings
from leetlab.exceptions import (
    LeetLabException,
    leetlab_exception_handler,
    unexpected_exception_handler,
)
from leetlab.middleware import CookieParserMiddleware, JSONBodyMiddleware
from leetlab.routing import load_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

GREETING = "hello guys welcome to leetlab"
AUTH_PREFIX = "/api/v1/auth"


def create_app(
    settings: Optional[Settings] = None,
    auth_router: Optional[APIRouter] = None,
) -> FastAPI:
    """
    Build the LeetLab application.

    Args:
        settings: Settings to use (defaults to the environment settings)
        auth_router: Router to mount at /api/v1/auth (defaults to the one
            named by settings.AUTH_ROUTER)

    Returns:
        FastAPI: The configured application
    """
    if settings is None:
        settings = get_settings()
    if auth_router is None:
        auth_router = load_router(settings.AUTH_ROUTER)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server running on port {settings.PORT}")
        logger.debug(f"Environment: {settings.ENVIRONMENT}, auth router: {settings.AUTH_ROUTER}")
        yield
        logger.info("Shutting down LeetLab API")

    app = FastAPI(
        title="LeetLab API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(JSONBodyMiddleware, limit=settings.json_body_limit_bytes)
    app.add_middleware(CookieParserMiddleware, secret=settings.COOKIE_SECRET)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(LeetLabException, leetlab_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        auth_router,
        prefix=AUTH_PREFIX,
        tags=["Auth"]
    )

    @app.get("/", response_class=PlainTextResponse, tags=["Root"])
    async def root() -> str:
        """Root endpoint - returns the greeting."""
        return GREETING

    return app


app = create_app()
