"""
DA Admin Backend — Stats Service
==================================

What:  Fixed dashboard and analytics figures for the /api/data routes.
"""

from admin_api.schemas.api import AnalyticsStats, DashboardStats


class StatsService:

    def dashboard(self) -> DashboardStats:
        return DashboardStats(
            total_users=150,
            total_orders=45,
            revenue=12500,
            growth_rate=15.2,
        )

    def analytics(self) -> AnalyticsStats:
        return AnalyticsStats(
            page_views=1250,
            unique_visitors=890,
            bounce_rate=32.5,
            avg_session_duration="2m 45s",
        )


stats_service = StatsService()
