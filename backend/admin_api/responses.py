"""
DA Admin Backend — Response Helpers
=====================================

What:  Builders for error envelopes and the timestamp format used by every
       success body.
Who:   Exception handlers in main.py and the CORS gate.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from admin_api.middleware.request_id import request_id_var
from admin_api.schemas.api import ErrorResponse


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-01-15T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def error_response(
    status_code: int,
    error: str,
    message: Optional[str] = None,
    path: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Serialize an ErrorResponse, dropping fields that were not set."""
    body = ErrorResponse(
        error=error,
        message=message,
        path=path,
        details=details or None,
        request_id=request_id_var.get("") or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )
