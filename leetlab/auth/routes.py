# =============================================================================
# leetlab/auth/routes.py - Default Authentication Router
# =============================================================================
# The router mounted at /api/v1/auth when AUTH_ROUTER is not set.
#
# It declares no endpoints: signup, login and token handling live in the
# module named by AUTH_ROUTER, e.g.
#
#   AUTH_ROUTER=myauth.routes:router
#
# Route modules get parsed input from the app middleware:
#   request.state.json_body       decoded JSON body ({} when a JSON request is
#                                 empty, None when the request is not JSON)
#   request.state.cookies         parsed cookies
#   request.state.signed_cookies  verified signed cookies (COOKIE_SECRET)
# =============================================================================

from fastapi import APIRouter

router = APIRouter()
