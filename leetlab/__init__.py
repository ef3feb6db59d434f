# =============================================================================
# leetlab/ - LeetLab Backend Package
# =============================================================================
# This package contains the HTTP application bootstrap:
# - main.py: App factory, middleware setup, error handlers, root route
# - config.py: Environment variable loading and settings
# - server.py: Process entry point (uvicorn)
# - middleware/: JSON body and cookie parsing
# - routing.py: Loader for the pluggable auth router
# - auth/: Default auth router mounted under /api/v1/auth
# =============================================================================

__version__ = "1.0.0"
