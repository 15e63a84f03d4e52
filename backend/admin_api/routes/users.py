"""
DA Admin Backend — User Routes
================================

    GET  /api/users            fixed user list
    GET  /api/users/{user_id}  echoed id with the constant user
    POST /api/users            201, echoes name/email under a new id
"""

from typing import Any, Dict

from fastapi import Depends

from admin_api.body import parse_body
from admin_api.routes.base import Route, RouteGroup
from admin_api.schemas.api import UserListResponse, UserResponse
from admin_api.services.user_service import user_service


async def list_users() -> UserListResponse:
    return UserListResponse(users=user_service.list_users())


async def get_user(user_id: str) -> UserResponse:
    """`user_id` stays a string so that non-numeric ids echo back as null."""
    return UserResponse(message=f"User {user_id}", user=user_service.get_user(user_id))


async def create_user(body: Dict[str, Any] = Depends(parse_body)) -> UserResponse:
    return UserResponse(
        message="User created successfully",
        user=user_service.create_user(body),
    )


group = RouteGroup(
    prefix="/api/users",
    tag="Users",
    routes=(
        Route("GET", "", list_users, UserListResponse, summary="List users"),
        Route("GET", "/{user_id}", get_user, UserResponse, summary="Get a user by id"),
        Route(
            "POST", "", create_user, UserResponse,
            status_code=201, summary="Create a user", errors=(400, 413),
        ),
    ),
)
