# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the LeetLab API:
# - test_config.py: Settings loading and validation
# - test_app.py: Root route, auth mount, error handling
# - test_json_body.py: JSON body parsing middleware
# - test_cookies.py: Cookie parsing middleware
# - test_routing.py: Auth router loader
# - test_server.py: Process entry point
# - auth_stub.py: Stand-in auth router used to exercise the mount
#
# Run tests with: pytest
# =============================================================================
