"""
DA Admin Backend — Unhandled Error Boundary
=============================================

What:  Turns any exception a route lets escape into the 500 error envelope.
How:   Sits just inside the CORS gate, so the 500 response still passes back
       through CORS, security headers, access logging and request ID.
       Handled errors (400/404/413) never get here; FastAPI's exception
       handlers convert them further in.

    development     {"error": "Something went wrong!", "message": <raw message>}
    anything else   {"error": "Something went wrong!", "message": "Internal server error"}
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from admin_api.responses import error_response

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "Internal server error"


def internal_error_response(exc: Exception, verbose: bool) -> Response:
    logger.error("Unexpected error: %s", str(exc), exc_info=exc)
    message = str(exc) if verbose else GENERIC_MESSAGE
    return error_response(500, error="Something went wrong!", message=message)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, verbose_errors: bool = False):
        super().__init__(app)
        self.verbose_errors = verbose_errors

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return internal_error_response(exc, self.verbose_errors)
