"""Middleware that logs every inbound request."""

import json
import logging
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

BODY_LOGGED_METHODS = frozenset({"POST", "PUT"})


def decode_body(raw: bytes) -> Any:
    """Decode a request body for logging.

    Args:
        raw: Body bytes as received

    Returns:
        The parsed JSON value, the raw text if it is not JSON, or None if empty
    """
    if not raw:
        return None
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method and path for each request, plus the body for POST and PUT.

    The log record's timestamp comes from the JSON formatter. The request is
    always passed on unchanged.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        method = request.method
        path = request.url.path

        logger.info(f"{method} {path}", extra={"method": method, "path": path})

        if method in BODY_LOGGED_METHODS:
            # Starlette caches the body, so the route handler can still read it
            body = decode_body(await request.body())
            logger.info(
                f"{method} {path} body",
                extra={"method": method, "path": path, "body": body},
            )

        return await call_next(request)
