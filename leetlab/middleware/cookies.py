# =============================================================================
# leetlab/middleware/cookies.py - Cookie Parsing Middleware
# =============================================================================
# Parses the Cookie header into request.state.cookies and, when a secret is
# configured, verifies signed cookies into request.state.signed_cookies.
#
# Cookie value formats:
#   plain        -> stored as-is (percent-decoded)
#   j:<json>     -> decoded JSON value
#   s:<v>.<sig>  -> signed; sig is unpadded base64 of HMAC-SHA256(secret, v)
#
# A signed cookie that fails verification is kept in signed_cookies as False,
# so routes can tell "tampered" apart from "absent".
# =============================================================================

import base64
import hashlib
import hmac
import json
import logging
from typing import Any, Callable, Optional
from urllib.parse import unquote

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request, cookie_parser
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

SIGNED_PREFIX = "s:"
JSON_PREFIX = "j:"


# =============================================================================
# Signing Helpers
# =============================================================================

def _signature(value: str, secret: str) -> str:
    digest = hmac.new(secret.encode(), value.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode().rstrip("=")


def sign_cookie_value(value: str, secret: str) -> str:
    """
    Sign a cookie value.

    Returns the value in the form the middleware verifies: s:<value>.<signature>
    """
    return f"{SIGNED_PREFIX}{value}.{_signature(value, secret)}"


def unsign_cookie_value(raw: str, secret: str) -> Optional[str]:
    """
    Verify a signed cookie value.

    Args:
        raw: Cookie value including the s: prefix
        secret: Signing secret

    Returns:
        The original value, or None if it is not signed or the signature
        does not match
    """
    if not raw.startswith(SIGNED_PREFIX):
        return None

    signed = raw[len(SIGNED_PREFIX):]
    value, sep, _ = signed.rpartition(".")
    if not sep:
        return None

    expected = f"{value}.{_signature(value, secret)}"
    if hmac.compare_digest(expected.encode(), signed.encode()):
        return value
    return None


def decode_json_cookie(value: str) -> Any:
    """Decode a j: cookie, returning the raw value if it is not valid JSON."""
    if not value.startswith(JSON_PREFIX):
        return value
    try:
        return json.loads(value[len(JSON_PREFIX):])
    except json.JSONDecodeError:
        return value


def parse_cookies(
    cookie_header: str,
    secret: Optional[str] = None,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Parse a Cookie header.

    Returns:
        Tuple of (cookies, signed_cookies)
    """
    cookies: dict[str, Any] = {}
    signed_cookies: dict[str, Any] = {}

    for name, raw in cookie_parser(cookie_header).items():
        value = unquote(raw)

        if secret and value.startswith(SIGNED_PREFIX):
            unsigned = unsign_cookie_value(value, secret)
            if unsigned is None:
                logger.debug(f"Signature mismatch for cookie {name!r}")
                signed_cookies[name] = False
            else:
                signed_cookies[name] = decode_json_cookie(unsigned)
            continue

        cookies[name] = decode_json_cookie(value)

    return cookies, signed_cookies


# =============================================================================
# Middleware
# =============================================================================

class CookieParserMiddleware(BaseHTTPMiddleware):
    """
    Middleware that exposes parsed cookies on request.state.

    Sets request.state.cookies and request.state.signed_cookies on every
    request, empty dicts when there is no Cookie header.
    """

    def __init__(self, app: ASGIApp, secret: Optional[str] = None):
        super().__init__(app)
        self.secret = secret

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        cookies, signed_cookies = parse_cookies(
            request.headers.get("cookie", ""), self.secret
        )
        request.state.cookies = cookies
        request.state.signed_cookies = signed_cookies
        return await call_next(request)
