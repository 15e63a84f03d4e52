"""
DA Admin Backend — Access Logging Middleware
==============================================

What:  One access log line per request in Apache combined log format,
       followed by duration and request ID.
How:   Times the downstream call and picks the log level from the status.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Example:
    127.0.0.1 - - [15/Jan/2024:12:00:00 +0000] "GET /api/users HTTP/1.1" 200 112
    "-" "curl/8.4.0" 1.4ms [a1b2c3d4]

What we don't log: request bodies, Authorization or Cookie headers.
"""

import logging
import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from admin_api.middleware.request_id import request_id_var

logger = logging.getLogger("admin_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log levels:
        5xx → ERROR
        4xx → WARNING
        else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "-"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        http_version = request.scope.get("http_version", "1.1")
        stamp = datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z")
        rid = request_id_var.get("")

        logger.log(
            log_level,
            '%s - - [%s] "%s %s HTTP/%s" %d %s "%s" "%s" %.1fms [%s]',
            client_ip,
            stamp,
            request.method,
            target,
            http_version,
            status,
            response.headers.get("content-length", "-"),
            request.headers.get("referer", "-"),
            request.headers.get("user-agent", "-"),
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
