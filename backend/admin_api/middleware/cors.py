"""
DA Admin Backend — Cross-Origin Policy Gate
=============================================

What:  Decides per request whether the declared Origin may use the API and
       attaches the CORS response headers.
How:   One pure decision function (`evaluate_origin`) plus a Starlette
       middleware that applies it before routing.

Policy:
    development (any environment except production)
        every origin is permitted; the origin is echoed back, or "*" when
        the request has none
    production
        no Origin header (curl, mobile apps, server-to-server) → permitted
        Origin in the allowlist                                → permitted
        anything else → 403 with an explicit error body; the route never runs

Permitted responses carry, including preflight answers:
    Access-Control-Allow-Origin       <origin> or *
    Access-Control-Allow-Methods      GET, POST, PUT, DELETE, OPTIONS
    Access-Control-Allow-Headers      Content-Type, Authorization, X-Requested-With, Accept
    Access-Control-Allow-Credentials  true

Preflight:
    Every permitted OPTIONS request, whatever the path, is answered here
    with 200 and no body.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from admin_api.exceptions import CORSRejectedError
from admin_api.responses import error_response

logger = logging.getLogger(__name__)

ALLOW_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOW_HEADERS = ("Content-Type", "Authorization", "X-Requested-With", "Accept")


def build_origin_allowlist(
    fixed: Iterable[Optional[str]], override: Optional[str] = None
) -> Tuple[str, ...]:
    """
    Combine the fixed production origins with an optional override.

    Empty entries are dropped and duplicates removed; order is kept.
    """
    allowlist = []
    for origin in [*fixed, override]:
        origin = (origin or "").strip()
        if origin and origin not in allowlist:
            allowlist.append(origin)
    return tuple(allowlist)


@dataclass(frozen=True)
class CORSDecision:
    allowed: bool
    allow_origin: Optional[str] = None


def evaluate_origin(
    origin: Optional[str], is_development: bool, allowlist: Tuple[str, ...]
) -> CORSDecision:
    """Pure policy decision for one request."""
    if is_development:
        return CORSDecision(allowed=True, allow_origin=origin or "*")
    if not origin:
        return CORSDecision(allowed=True, allow_origin="*")
    if origin in allowlist:
        return CORSDecision(allowed=True, allow_origin=origin)
    return CORSDecision(allowed=False)


def cors_headers(allow_origin: str) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ", ".join(ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(ALLOW_HEADERS),
        "Access-Control-Allow-Credentials": "true",
    }


class CORSPolicyMiddleware(BaseHTTPMiddleware):
    """
    Applies evaluate_origin() to every request.

    Args:
        is_development: permissive mode when True
        allowlist: output of build_origin_allowlist(), computed once at startup
    """

    def __init__(self, app: ASGIApp, is_development: bool, allowlist: Tuple[str, ...] = ()):
        super().__init__(app)
        self.is_development = is_development
        self.allowlist = tuple(allowlist)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        origin = request.headers.get("origin")
        decision = evaluate_origin(origin, self.is_development, self.allowlist)

        if not decision.allowed:
            exc = CORSRejectedError(origin)
            logger.warning("CORS blocked origin: %s", origin)
            return error_response(
                exc.status_code,
                error="Not allowed by CORS",
                message=exc.message,
                details=exc.context,
            )

        headers = cors_headers(decision.allow_origin)

        if request.method == "OPTIONS":
            response = Response(status_code=200, headers=headers)
        else:
            response = await call_next(request)
            response.headers.update(headers)

        if decision.allow_origin != "*":
            response.headers.add_vary_header("Origin")
        return response
