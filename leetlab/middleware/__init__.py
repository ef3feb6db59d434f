# =============================================================================
# leetlab/middleware/ - Request Parsing Middleware
# =============================================================================
# - json_body.py: Buffers and decodes JSON request bodies
# - cookies.py: Parses plain, JSON and signed cookies
# =============================================================================

from leetlab.middleware.cookies import (
    CookieParserMiddleware,
    parse_cookies,
    sign_cookie_value,
    unsign_cookie_value,
)
from leetlab.middleware.json_body import JSONBodyMiddleware, parse_json_body

__all__ = [
    "CookieParserMiddleware",
    "JSONBodyMiddleware",
    "parse_cookies",
    "parse_json_body",
    "sign_cookie_value",
    "unsign_cookie_value",
]
