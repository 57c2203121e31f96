"""Preflight CORS Middleware — resolves OPTIONS probes before routing.

Invariants:
    - Non-OPTIONS requests pass through untouched (no CORS headers added)
    - OPTIONS requests never reach the wrapped app, accepted or not
    - Rejection is a bare 400: no hint of which check failed
    - Accepted probes reflect the request Origin, never "*"

Design Decisions:
    - Pure ASGI middleware (not BaseHTTPMiddleware): wraps FastAPI or a bare
      ASGI callable alike
    - Not verbose: wrap with RequestLoggingMiddleware to observe probes
"""

from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from app.core.cors_policy import (
    CORSConfig, PreflightRequest, PREFLIGHT_METHOD, default_cors_config,
)


class PreflightCORSMiddleware:
    """Answers CORS preflight probes according to a CORSConfig."""

    def __init__(self, app: ASGIApp, config: CORSConfig) -> None:
        self.app = app
        self.config = config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != PREFLIGHT_METHOD:
            await self.app(scope, receive, send)
            return

        response = self.preflight_response(Headers(scope=scope))
        await response(scope, receive, send)

    def preflight_response(self, headers: Headers) -> Response:
        """Decide a probe and build the terminal response."""
        preflight = PreflightRequest.from_headers(headers)
        if not self.config.accepts(preflight):
            return Response(status_code=400)

        response_headers = {}
        if self.config.supports_credentials:
            response_headers["Access-Control-Allow-Credentials"] = "true"
        response_headers["Access-Control-Allow-Origin"] = preflight.origin
        if self.config.max_age != 0:
            response_headers["Access-Control-Max-Age"] = str(self.config.max_age)
        return Response(status_code=200, headers=response_headers)


def with_cors(app: ASGIApp, config: CORSConfig) -> ASGIApp:
    """Wrap an ASGI app with preflight handling for the given policy."""
    return PreflightCORSMiddleware(app, config)


def with_default_cors(app: ASGIApp) -> ASGIApp:
    """Wrap an ASGI app with the default policy (see default_cors_config)."""
    return PreflightCORSMiddleware(app, default_cors_config())
