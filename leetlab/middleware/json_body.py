# =============================================================================
# leetlab/middleware/json_body.py - JSON Body Parsing Middleware
# =============================================================================
# Buffers and decodes JSON request bodies before they reach a route.
#
# - Only requests with an application/json (or +json) Content-Type are touched
# - The charset parameter must be a utf-* charset (default utf-8), otherwise 415
# - gzip and deflate Content-Encodings are inflated, other encodings get 415
# - Bodies over the configured limit (after inflating) are rejected with 413
# - Malformed JSON, or a top-level value that is not an object/array, is
#   rejected with 400
# - The decoded value is stored on request.state.json_body (None for requests
#   that are not JSON) and the body is replayed downstream, so pydantic body
#   models keep working
#
# Written as a plain ASGI middleware: it has to sit outside FastAPI's
# exception handlers, so errors are rendered here directly.
# =============================================================================

import codecs
import json
import logging
import zlib
from typing import Any

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from leetlab.exceptions import (
    InvalidJSONBodyError,
    LeetLabException,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100 * 1024
DEFAULT_CHARSET = "utf-8"

# Content-Encoding -> zlib wbits
DECOMPRESSORS = {
    "gzip": 16 + zlib.MAX_WBITS,
    "deflate": zlib.MAX_WBITS,
}


def parse_content_type(content_type: str | None) -> tuple[str, str | None]:
    """
    Split a Content-Type header into (media_type, charset).

    Both are lower-cased; charset is None when the parameter is absent.
    """
    if not content_type:
        return "", None

    media_type, _, params = content_type.partition(";")
    charset = None
    for param in params.split(";"):
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset":
            charset = value.strip().strip('"').lower() or None

    return media_type.strip().lower(), charset


def is_json_content_type(content_type: str | None) -> bool:
    """Return True for application/json and any */*+json media type."""
    media_type, _ = parse_content_type(content_type)
    return media_type == "application/json" or media_type.endswith("+json")


def resolve_charset(charset: str | None) -> str:
    """
    Validate the declared charset of a JSON body.

    Raises:
        UnsupportedMediaTypeError: If the charset is not a known utf-* codec
    """
    if charset is None:
        return DEFAULT_CHARSET
    if not charset.startswith("utf-"):
        raise UnsupportedMediaTypeError("charset", charset)
    try:
        codecs.lookup(charset)
    except LookupError as e:
        raise UnsupportedMediaTypeError("charset", charset) from e
    return charset


def resolve_encoding(content_encoding: str | None) -> str:
    """
    Validate the Content-Encoding of a JSON body.

    Raises:
        UnsupportedMediaTypeError: If the encoding is not identity, gzip or deflate
    """
    encoding = (content_encoding or "identity").strip().lower()
    if encoding != "identity" and encoding not in DECOMPRESSORS:
        raise UnsupportedMediaTypeError("encoding", encoding)
    return encoding


def parse_json_body(body: bytes, charset: str = DEFAULT_CHARSET) -> Any:
    """
    Decode a request body.

    An empty body decodes to an empty dict. Anything else must be JSON in
    the given charset whose top-level value is an object or an array.

    Raises:
        InvalidJSONBodyError: If the body cannot be decoded
    """
    try:
        text = body.decode(charset)
    except UnicodeDecodeError as e:
        raise InvalidJSONBodyError(f"body is not {charset} ({e.reason})") from e

    if not text.strip():
        return {}

    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidJSONBodyError(e.msg) from e

    if not isinstance(value, (dict, list)):
        raise InvalidJSONBodyError("top-level value must be an object or an array")

    return value


class JSONBodyMiddleware:
    """ASGI middleware that parses JSON request bodies."""

    def __init__(self, app: ASGIApp, limit: int = DEFAULT_LIMIT) -> None:
        self.app = app
        self.limit = limit

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if not is_json_content_type(headers.get("content-type")):
            scope.setdefault("state", {})["json_body"] = None
            await self.app(scope, receive, send)
            return

        try:
            _, declared_charset = parse_content_type(headers.get("content-type"))
            charset = resolve_charset(declared_charset)
            encoding = resolve_encoding(headers.get("content-encoding"))
            if encoding == "identity":
                self._check_content_length(headers)
            body = await self._read_body(receive, encoding)
            if body is None:
                # Client disconnected before sending the whole body
                return
            parsed = parse_json_body(body, charset)
        except LeetLabException as exc:
            logger.debug(f"Rejected JSON body on {scope.get('path')}: {exc.code}")
            await exc.to_response()(scope, receive, send)
            return

        scope.setdefault("state", {})["json_body"] = parsed

        if encoding != "identity":
            # Downstream sees the inflated body
            scope = dict(scope)
            scope["headers"] = [
                (name, value)
                for name, value in scope["headers"]
                if name.lower() not in (b"content-encoding", b"content-length")
            ] + [(b"content-length", str(len(body)).encode())]

        body_sent = False

        async def replay() -> Message:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    def _check_content_length(self, headers: Headers) -> None:
        content_length = headers.get("content-length")
        if content_length and content_length.isdigit():
            size = int(content_length)
            if size > self.limit:
                raise PayloadTooLargeError(size, self.limit)

    async def _read_body(self, receive: Receive, encoding: str = "identity") -> bytes | None:
        decompressor = None
        if encoding in DECOMPRESSORS:
            decompressor = zlib.decompressobj(DECOMPRESSORS[encoding])

        chunks: list[bytes] = []
        size = 0
        more_body = True

        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return None
            chunk = message.get("body", b"")
            more_body = message.get("more_body", False)
            if decompressor is not None:
                chunk = self._inflate(decompressor, chunk, size, final=not more_body)
            size += len(chunk)
            if size > self.limit:
                raise PayloadTooLargeError(size, self.limit)
            chunks.append(chunk)

        return b"".join(chunks)

    def _inflate(self, decompressor, chunk: bytes, size: int, final: bool) -> bytes:
        # Output is capped one byte past the limit
        try:
            data = decompressor.decompress(chunk, self.limit - size + 1)
            if final and len(data) + size <= self.limit:
                data += decompressor.flush()
        except zlib.error as e:
            raise InvalidJSONBodyError(f"cannot decompress body ({e})") from e
        return data
