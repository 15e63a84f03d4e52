"""
DA Admin Backend — Request Body Parsing
=========================================

What:  FastAPI dependency that turns the raw request body into a dict
       before the route handler runs.
How:   Enforces the size ceiling (Content-Length first, then actual bytes),
       then decodes by Content-Type:

           application/json, */*+json          → json.loads
           application/x-www-form-urlencoded   → form fields
           anything else / no body             → {}

Failure modes (never reach the handler):
    body larger than settings.max_body_size → PayloadTooLargeError (413)
    JSON that does not parse, or nests too  → MalformedBodyError (400)
    deeply to parse
"""

import json
from typing import Any, Dict

from fastapi import Request

from admin_api.exceptions import MalformedBodyError, PayloadTooLargeError

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


def _media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


def _is_json(media_type: str) -> bool:
    return media_type == JSON_MEDIA_TYPE or media_type.endswith("+json")


def _check_declared_size(request: Request, limit: int) -> None:
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit=limit, size=int(declared))


async def parse_body(request: Request) -> Dict[str, Any]:
    """
    Dependency returning the parsed request body.

    Non-object JSON values (arrays, strings, numbers) yield {} so that
    field lookups in handlers behave as "field missing".
    """
    limit = request.app.state.settings.max_body_size
    _check_declared_size(request, limit)

    media_type = _media_type(request)
    raw = await request.body()
    if len(raw) > limit:
        raise PayloadTooLargeError(limit=limit, size=len(raw))
    if not raw:
        return {}

    if _is_json(media_type):
        try:
            parsed = json.loads(raw)
        # RecursionError: nesting deeper than the interpreter's stack allows
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            raise MalformedBodyError(detail=str(exc)) from exc
        return parsed if isinstance(parsed, dict) else {}

    if media_type == FORM_MEDIA_TYPE:
        form = await request.form()
        fields: Dict[str, Any] = {}
        for key in form.keys():
            values = form.getlist(key)
            # Repeated keys keep every value, as extended urlencoded parsing does
            fields[key] = values[0] if len(values) == 1 else values
        return fields

    return {}
