"""
Stockroom Backend — Request Logging Middleware
================================================

What:  One access log line for every HTTP request: method, path, status,
       duration, request ID and client address.
How:   Measures the time around ``call_next`` and picks the log level from
       the response status.
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Example line:
    2026-01-15T12:00:00 [INFO] stockroom.access: GET /stuff 200 3.4ms [1f0c2a9b] from 127.0.0.1
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from stockroom.middleware.request_id import request_id_var

logger = logging.getLogger("stockroom.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Level by status: 5xx → ERROR, 4xx → WARNING, everything else → INFO.
    Health probes and static assets are not logged.
    """

    SKIPPED_PREFIXES = ("/health", "/static/")

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path.startswith(self.SKIPPED_PREFIXES):
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
