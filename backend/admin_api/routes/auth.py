"""
DA Admin Backend — Auth Routes
================================

    POST /api/auth/login     200 token + user, 400 when email/password missing
    POST /api/auth/register  201 user, 400 when name/email/password missing

Both are placeholders: no credentials are checked and nothing is stored.
"""

from typing import Any, Dict

from fastapi import Depends

from admin_api.body import parse_body
from admin_api.routes.base import Route, RouteGroup
from admin_api.schemas.api import LoginResponse, UserResponse
from admin_api.services.auth_service import MOCK_TOKEN, auth_service


async def login(body: Dict[str, Any] = Depends(parse_body)) -> LoginResponse:
    user = auth_service.login(body)
    return LoginResponse(token=MOCK_TOKEN, user=user)


async def register(body: Dict[str, Any] = Depends(parse_body)) -> UserResponse:
    user = auth_service.register(body)
    return UserResponse(message="User registered successfully", user=user)


group = RouteGroup(
    prefix="/api/auth",
    tag="Auth",
    routes=(
        Route(
            "POST", "/login", login, LoginResponse,
            summary="Mock login", errors=(400, 413),
        ),
        Route(
            "POST", "/register", register, UserResponse,
            status_code=201, summary="Mock registration", errors=(400, 413),
        ),
    ),
)
