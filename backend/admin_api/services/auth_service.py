"""
DA Admin Backend — Auth Service
=================================

What:  Placeholder login and registration.
How:   Presence checks only. Login hands back a constant token; register
       echoes the submitted identity under a time-derived id.
Who:   Called by routes/auth.py.

A field counts as missing when it is absent or falsy ("", null, 0, false).
Missing fields raise MissingFieldsError, which the global handler turns
into a 400 before any success body is built.
"""

import logging
from typing import Any, Dict, Sequence

from admin_api.exceptions import MissingFieldsError
from admin_api.schemas.api import User
from admin_api.services.user_service import generate_id

logger = logging.getLogger(__name__)

MOCK_TOKEN = "mock-jwt-token"


def require_fields(body: Dict[str, Any], fields: Sequence[str], message: str) -> None:
    """Raise MissingFieldsError naming every required field that is empty."""
    missing = [name for name in fields if not body.get(name)]
    if missing:
        raise MissingFieldsError(message=message, missing=missing)


class AuthService:

    def login(self, body: Dict[str, Any]) -> User:
        require_fields(body, ("email", "password"), "Email and password are required")
        logger.info("Mock login for %s", body["email"])
        return User(id=1, email=body["email"], name="Test User")

    def register(self, body: Dict[str, Any]) -> User:
        require_fields(
            body,
            ("name", "email", "password"),
            "Name, email, and password are required",
        )
        return User(id=generate_id(), name=body["name"], email=body["email"])


auth_service = AuthService()
