"""
DA Admin Backend — Cross-Origin Policy Gate Tests
===================================================

What we test:
    ✅ Allowlist construction drops empty entries and duplicates
    ✅ Development echoes any origin (or "*") with credentials
    ✅ Production allows allowlisted and origin-less requests
    ✅ Production rejects other origins with 403 before any handler runs
    ✅ OPTIONS on any path is answered with 200 + CORS headers
"""

from unittest.mock import patch

import pytest

from admin_api.config import DEFAULT_ALLOWED_ORIGINS
from admin_api.middleware.cors import build_origin_allowlist, evaluate_origin

FRONTEND_URL = "https://admin.example.com"

CORS_HEADERS = (
    "access-control-allow-origin",
    "access-control-allow-methods",
    "access-control-allow-headers",
    "access-control-allow-credentials",
)


class TestBuildOriginAllowlist:

    def test_appends_override(self):
        allowlist = build_origin_allowlist(["https://a.test"], "https://b.test")
        assert allowlist == ("https://a.test", "https://b.test")

    def test_drops_missing_override_and_empty_entries(self):
        allowlist = build_origin_allowlist(["https://a.test", "", None], None)
        assert allowlist == ("https://a.test",)

    def test_removes_duplicates_keeping_order(self):
        allowlist = build_origin_allowlist(
            ["https://a.test", "https://b.test", "https://a.test"], "https://b.test"
        )
        assert allowlist == ("https://a.test", "https://b.test")


class TestEvaluateOrigin:

    def test_development_echoes_origin(self):
        decision = evaluate_origin("https://anything.test", True, ())
        assert decision.allowed
        assert decision.allow_origin == "https://anything.test"

    def test_development_without_origin_uses_wildcard(self):
        assert evaluate_origin(None, True, ()).allow_origin == "*"

    def test_production_rejects_unknown_origin(self):
        assert not evaluate_origin("https://evil.test", False, ("https://a.test",)).allowed

    def test_production_requires_exact_match(self):
        allowlist = ("https://a.test",)
        assert not evaluate_origin("https://a.test/", False, allowlist).allowed
        assert not evaluate_origin("http://a.test", False, allowlist).allowed
        assert evaluate_origin("https://a.test", False, allowlist).allowed


class TestDevelopmentCORS:

    @pytest.mark.asyncio
    async def test_any_origin_is_echoed(self, test_client):
        origin = "http://localhost:5173"
        response = await test_client.get("/api/users", headers={"Origin": origin})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == origin
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "Origin" in response.headers["vary"]

    @pytest.mark.asyncio
    async def test_staging_is_permissive_too(self, staging_client):
        response = await staging_client.get("/api/users", headers={"Origin": "https://x.test"})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://x.test"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/users", "/api/auth/login", "/no/such/path", "/"])
    async def test_preflight_on_any_path(self, test_client, path):
        with patch("admin_api.routes.auth.auth_service") as mock_auth:
            response = await test_client.options(
                path,
                headers={
                    "Origin": "http://localhost:3000",
                    "Access-Control-Request-Method": "POST",
                },
            )
            mock_auth.login.assert_not_called()

        assert response.status_code == 200
        assert response.content == b""
        for header in CORS_HEADERS:
            assert header in response.headers
        assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"
        assert response.headers["access-control-allow-headers"] == (
            "Content-Type, Authorization, X-Requested-With, Accept"
        )


class TestProductionCORS:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("origin", [*DEFAULT_ALLOWED_ORIGINS, FRONTEND_URL])
    async def test_allowlisted_origin_is_permitted(self, prod_client, origin):
        response = await prod_client.get("/api/data/dashboard", headers={"Origin": origin})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == origin

    @pytest.mark.asyncio
    async def test_request_without_origin_is_permitted(self, prod_client):
        response = await prod_client.get("/api/data/dashboard")
        assert response.status_code == 200
        for header in CORS_HEADERS:
            assert header in response.headers

    @pytest.mark.asyncio
    async def test_unknown_origin_is_rejected_before_handler(self, prod_client):
        with patch("admin_api.routes.users.user_service") as mock_users:
            response = await prod_client.post(
                "/api/users",
                json={"name": "Ann", "email": "ann@x.com"},
                headers={"Origin": "https://evil.test"},
            )
            mock_users.create_user.assert_not_called()

        assert response.status_code == 403
        body = response.json()
        assert body["error"] == "Not allowed by CORS"
        assert body["message"] == "Not allowed by CORS. Origin: https://evil.test"
        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_unknown_origin_preflight_is_rejected(self, prod_client):
        response = await prod_client.options(
            "/api/users", headers={"Origin": "https://evil.test"}
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_allowlisted_preflight_is_answered(self, prod_client):
        response = await prod_client.options("/api/auth/login", headers={"Origin": FRONTEND_URL})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == FRONTEND_URL
