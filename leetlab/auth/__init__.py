# =============================================================================
# leetlab/auth/ - Authentication Route Group
# =============================================================================
# Mounted at /api/v1/auth. The endpoints themselves are provided by the
# deployment through the AUTH_ROUTER setting; routes.py is the default mount.
# =============================================================================

from leetlab.auth.routes import router

__all__ = ["router"]
