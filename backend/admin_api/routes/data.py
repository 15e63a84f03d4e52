"""
DA Admin Backend — Data Routes
================================

    GET /api/data/dashboard  fixed dashboard figures
    GET /api/data/analytics  fixed analytics figures
"""

from admin_api.routes.base import Route, RouteGroup
from admin_api.schemas.api import AnalyticsResponse, DashboardResponse
from admin_api.services.stats_service import stats_service


async def dashboard() -> DashboardResponse:
    return DashboardResponse(data=stats_service.dashboard())


async def analytics() -> AnalyticsResponse:
    return AnalyticsResponse(analytics=stats_service.analytics())


group = RouteGroup(
    prefix="/api/data",
    tag="Data",
    routes=(
        Route("GET", "/dashboard", dashboard, DashboardResponse, summary="Dashboard figures"),
        Route("GET", "/analytics", analytics, AnalyticsResponse, summary="Analytics figures"),
    ),
)
