"""
Quote Service — Request Log Middleware
=======================================

What:  Gives each request a correlation ID and writes one access log line
       when the response is ready.
How:   The ID comes from the client's `X-Request-ID` header or a short UUID.
       It is kept in a ContextVar so exception handlers can put it in error
       bodies, and is echoed back in the response header.

Log line:
    GET /quotes/{quote_id} 404 1.3ms [a1b2c3d4]

    The path is the matched route template, so lookups of different ids
    group under one key. Unmatched paths are logged as requested.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("quoteservice.access")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def route_template(request: Request) -> str:
    """Path template of the route that handled `request`, else the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestLogMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]
        request_id_var.set(rid)

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            "%s %s %d %.1fms [%s]",
            request.method,
            route_template(request),
            status,
            duration_ms,
            rid,
        )

        response.headers["X-Request-ID"] = rid
        return response
