"""
DA Admin Backend — User Service
=================================

What:  Mock user directory behind the /api/users routes.
How:   Returns fixed records; created users echo the submitted fields under
       an id derived from the current time. Nothing is stored.
Who:   Called by routes/users.py.
"""

import logging
import re
import time
from typing import Any, Dict, List, Optional

from admin_api.schemas.api import User

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

DEFAULT_USER = {"name": "John Doe", "email": "john@example.com"}


def generate_id() -> int:
    """Identifier for newly created records: epoch time in milliseconds."""
    return int(time.time() * 1000)


def parse_leading_int(value: str) -> Optional[int]:
    """
    Leading integer of a path segment, or None.

    "7" → 7, "42abc" → 42, "abc" → None
    """
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class UserService:
    """Read and create operations over the fixed user list."""

    def __init__(self) -> None:
        self._users: List[User] = [
            User(id=1, name="John Doe", email="john@example.com"),
            User(id=2, name="Jane Smith", email="jane@example.com"),
        ]

    def list_users(self) -> List[User]:
        return list(self._users)

    def get_user(self, raw_id: str) -> User:
        return User(id=parse_leading_int(raw_id), **DEFAULT_USER)

    def create_user(self, body: Dict[str, Any]) -> User:
        user = User(id=generate_id(), name=body.get("name"), email=body.get("email"))
        logger.info("Created user %s", user.id)
        return user


user_service = UserService()
