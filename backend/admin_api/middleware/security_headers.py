"""
DA Admin Backend — Security Headers Middleware
================================================

What:  Adds the usual HTTP hardening headers to every response.
How:   Headers come from a frozen SecurityHeadersConfig; a header already set
       by the route is left alone. None disables a header.

Defaults:
    Content-Security-Policy          default-src 'self'; ... (see config)
    Cross-Origin-Opener-Policy       same-origin
    Cross-Origin-Resource-Policy     same-origin
    Origin-Agent-Cluster             ?1
    Referrer-Policy                  no-referrer
    Strict-Transport-Security        max-age=15552000; includeSubDomains
    X-Content-Type-Options           nosniff
    X-DNS-Prefetch-Control           off
    X-Download-Options               noopen
    X-Frame-Options                  SAMEORIGIN
    X-Permitted-Cross-Domain-Policies none
    X-XSS-Protection                 0
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


@dataclass(frozen=True)
class SecurityHeadersConfig:
    """Header values applied as-is. Field names map to header names below."""

    content_security_policy: Optional[str] = (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    )
    cross_origin_opener_policy: Optional[str] = "same-origin"
    cross_origin_resource_policy: Optional[str] = "same-origin"
    origin_agent_cluster: Optional[str] = "?1"
    referrer_policy: Optional[str] = "no-referrer"
    strict_transport_security: Optional[str] = "max-age=15552000; includeSubDomains"
    x_content_type_options: Optional[str] = "nosniff"
    x_dns_prefetch_control: Optional[str] = "off"
    x_download_options: Optional[str] = "noopen"
    x_frame_options: Optional[str] = "SAMEORIGIN"
    x_permitted_cross_domain_policies: Optional[str] = "none"
    x_xss_protection: Optional[str] = "0"

    def headers(self) -> Dict[str, str]:
        result = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None:
                result[_header_name(field.name)] = value
        return result


_ACRONYMS = {"dns": "DNS", "xss": "XSS"}


def _header_name(field_name: str) -> str:
    """x_content_type_options → X-Content-Type-Options"""
    return "-".join(_ACRONYMS.get(part, part.capitalize()) for part in field_name.split("_"))


class SecurityHeadersMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, config: Optional[SecurityHeadersConfig] = None):
        super().__init__(app)
        self._headers = (config or SecurityHeadersConfig()).headers()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            if name not in response.headers:
                response.headers[name] = value
        return response
