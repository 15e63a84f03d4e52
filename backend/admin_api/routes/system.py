"""
DA Admin Backend — System Routes
==================================

What:  Service metadata, health check and a request echo for smoke tests.

    GET /             service name, version, status, timestamp
    GET /api/health   status, uptime, environment, database handle state
    GET /api/test     echo of method, path and timestamp

Health does no I/O: it reports the handle opened at startup rather than
querying the database on every probe.
"""

import time

from fastapi import Request

from admin_api import __version__
from admin_api.responses import utc_timestamp
from admin_api.routes.base import Route, RouteGroup
from admin_api.schemas.api import EchoResponse, HealthResponse, ServiceInfoResponse

# Process start, for uptime reporting
_start_time = time.time()


async def service_info() -> ServiceInfoResponse:
    return ServiceInfoResponse(version=__version__, timestamp=utc_timestamp())


async def health_check(request: Request) -> HealthResponse:
    handle = getattr(request.app.state, "database", None)
    return HealthResponse(
        uptime=round(time.time() - _start_time, 3),
        timestamp=utc_timestamp(),
        environment=request.app.state.settings.environment,
        database="connected" if handle is not None and handle.connected else "disconnected",
    )


async def echo(request: Request) -> EchoResponse:
    return EchoResponse(
        timestamp=utc_timestamp(),
        method=request.method,
        path=request.url.path,
    )


group = RouteGroup(
    prefix="",
    tag="System",
    routes=(
        Route("GET", "/", service_info, ServiceInfoResponse, summary="Service metadata"),
        Route("GET", "/api/health", health_check, HealthResponse, summary="Health check"),
        Route("GET", "/api/test", echo, EchoResponse, summary="Request echo"),
    ),
)
