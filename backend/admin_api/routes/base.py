"""
DA Admin Backend — Route Records
==================================

What:  Immutable records describing routes: one Route per (method, path,
       handler), grouped under a shared path prefix by RouteGroup.
Who:   Each route module exports a RouteGroup; routes/table.py collects
       them into the application's static route table.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    response_model: Optional[Any] = None
    status_code: int = 200
    summary: Optional[str] = None
    # Error statuses documented in the OpenAPI schema
    errors: Tuple[int, ...] = ()


@dataclass(frozen=True)
class RouteGroup:
    prefix: str
    tag: str
    routes: Tuple[Route, ...]

    def full_path(self, route: Route) -> str:
        return f"{self.prefix}{route.path}" or "/"
