# =============================================================================
# leetlab/routing.py - Pluggable Router Loader
# =============================================================================
# Resolves a "package.module:attribute" path to a FastAPI APIRouter.
# Used to mount the auth route group, which is supplied per deployment.
# =============================================================================

import importlib
import logging

from fastapi import APIRouter

from leetlab.exceptions import RouterImportError

logger = logging.getLogger(__name__)


def load_router(path: str) -> APIRouter:
    """
    Import a router from a "module:attribute" path.

    Args:
        path: e.g. "leetlab.auth.routes:router"

    Returns:
        APIRouter: The router object

    Raises:
        RouterImportError: If the path is malformed, the module or attribute
            is missing, or the attribute is not an APIRouter
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise RouterImportError(path, "expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RouterImportError(path, str(e)) from e

    try:
        router = getattr(module, attr)
    except AttributeError as e:
        raise RouterImportError(path, f"module {module_name!r} has no attribute {attr!r}") from e

    if not isinstance(router, APIRouter):
        raise RouterImportError(path, f"{attr!r} is a {type(router).__name__}, not an APIRouter")

    logger.debug(f"Loaded router {path} ({len(router.routes)} routes)")
    return router
