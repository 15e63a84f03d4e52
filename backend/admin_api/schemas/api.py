"""
DA Admin Backend — Pydantic Response Schemas
==============================================

What:  Pydantic models defining the JSON envelopes the API returns.
How:   Route handlers declare these as `response_model`; FastAPI serializes
       them by alias, so snake_case attributes go out as camelCase keys
       (total_users → totalUsers).
Who:   Used by routes/* and by responses.error_response() for error bodies.

Envelope conventions:
    success → {"message": ..., <payload field>: ...}
              payload fields: user, users, data, analytics, token
    failure → {"error": ..., "message"?, "path"?, "details"?, "request_id"?}
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for wire models whose keys are camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Users
# ══════════════════════════════════════════════════════════════════════════


class User(CamelModel):
    # id is null when the path segment carries no leading integer
    id: Optional[int] = Field(description="User identifier")
    # Submitted values are echoed back as sent
    name: Any = Field(default=None, description="Display name")
    email: Any = Field(default=None, description="Email address")


class UserResponse(CamelModel):
    message: str = Field(description="Human-readable result message")
    user: User


class UserListResponse(CamelModel):
    message: str = Field(default="Users endpoint")
    users: List[User]


# ══════════════════════════════════════════════════════════════════════════
# Auth
# ══════════════════════════════════════════════════════════════════════════


class LoginResponse(CamelModel):
    message: str = Field(default="Login successful")
    token: str = Field(description="Placeholder bearer token")
    user: User


# ══════════════════════════════════════════════════════════════════════════
# Data
# ══════════════════════════════════════════════════════════════════════════


class DashboardStats(CamelModel):
    total_users: int
    total_orders: int
    revenue: int
    growth_rate: float


class DashboardResponse(CamelModel):
    message: str = Field(default="Dashboard data")
    data: DashboardStats


class AnalyticsStats(CamelModel):
    page_views: int
    unique_visitors: int
    bounce_rate: float
    avg_session_duration: str


class AnalyticsResponse(CamelModel):
    message: str = Field(default="Analytics data")
    analytics: AnalyticsStats


# ══════════════════════════════════════════════════════════════════════════
# System
# ══════════════════════════════════════════════════════════════════════════


class ServiceInfoResponse(CamelModel):
    message: str = Field(default="DA Admin Backend API")
    version: str
    status: str = Field(default="running")
    timestamp: str = Field(description="ISO-8601 UTC timestamp")


class HealthResponse(CamelModel):
    """
    What:  Liveness report for monitoring and load balancers.

    `database` reflects the startup handle only; it does not query the
    database on each call.
    """

    status: str = Field(default="healthy")
    uptime: float = Field(description="Seconds since the process started")
    timestamp: str
    environment: str
    database: str = Field(description="connected or disconnected")


class EchoResponse(CamelModel):
    message: str = Field(default="API test endpoint working!")
    timestamp: str
    method: str
    path: str


# ══════════════════════════════════════════════════════════════════════════
# Errors
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error envelope shared by every failure status.

    Example:
        {
            "error": "Route not found",
            "path": "/api/nope",
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="Error summary")
    message: Optional[str] = Field(default=None, description="Additional description")
    path: Optional[str] = Field(default=None, description="Requested path (404 only)")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Extra context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
