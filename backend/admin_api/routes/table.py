"""
DA Admin Backend — Static Route Table
=======================================

What:  The complete list of routes, built once at import and registered on
       a single APIRouter by build_router().
How:   Groups are matched by path prefix, then by literal or single
       {param} segment within the group. FastAPI's router performs the
       matching; anything it cannot match falls to the 404 handler.

    Prefix       Routes
    ──────────   ─────────────────────────────────────────────
    (none)       GET /, GET /api/health, GET /api/test
    /api/users   GET "", GET /{user_id}, POST ""
    /api/auth    POST /login, POST /register
    /api/data    GET /dashboard, GET /analytics

Trailing slashes are not significant: every route except "/" is also
registered at path + "/" (hidden from the schema), so /api/users/ answers
200 directly instead of Starlette's 307 redirect.
"""

from typing import Iterable, Tuple

from fastapi import APIRouter

from admin_api.routes import auth, data, system, users
from admin_api.routes.base import RouteGroup
from admin_api.schemas.api import ErrorResponse

ROUTE_TABLE: Tuple[RouteGroup, ...] = (
    system.group,
    users.group,
    auth.group,
    data.group,
)


def build_router(groups: Iterable[RouteGroup] = ROUTE_TABLE) -> APIRouter:
    router = APIRouter()
    for group in groups:
        for route in group.routes:
            path = group.full_path(route)
            paths = [path] if path == "/" else [path, path + "/"]
            for index, variant in enumerate(paths):
                router.add_api_route(
                    variant,
                    route.endpoint,
                    methods=[route.method],
                    response_model=route.response_model,
                    status_code=route.status_code,
                    summary=route.summary,
                    tags=[group.tag],
                    responses={code: {"model": ErrorResponse} for code in route.errors},
                    include_in_schema=index == 0,
                )
    return router
