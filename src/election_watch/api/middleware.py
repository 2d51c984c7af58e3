"""HTTP middleware for the election endpoints.

Browser origins are gated by CORS, responses carry hardening headers, and
each caller is capped per minute before any provider call is made.
"""

import time
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from election_watch.core.config import Settings
from election_watch.schemas.common import ErrorEnvelope

_DEFAULT_TRUSTED_HEADERS = ["CF-Connecting-IP", "X-Forwarded-For", "X-Real-IP"]


def get_client_ip(request: Request, trusted_headers: list[str] | None = None) -> str:
    """Resolve the address a request is rate limited under.

    The first non-empty header from ``trusted_headers`` wins; for
    X-Forwarded-For only the leftmost hop is used. Without any, the socket
    peer address is used.

    Args:
        request: Incoming request.
        trusted_headers: Header names to consult, highest priority first.
            ``None`` means CF-Connecting-IP, X-Forwarded-For, then X-Real-IP.

    Returns:
        The caller's address, or ``"unknown"`` when the request has no peer.
    """
    headers = trusted_headers if trusted_headers is not None else _DEFAULT_TRUSTED_HEADERS

    for header in headers:
        value = request.headers.get(header, "").strip()
        if not value:
            continue
        if header.lower() == "x-forwarded-for":
            return value.split(",")[0].strip()
        return value

    if request.client:
        return request.client.host
    return "unknown"


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Allow read-only cross-origin calls from the configured front-end origins."""
    kwargs: dict[str, Any] = {
        "allow_methods": ["GET", "OPTIONS"],
        "allow_headers": ["*"],
    }
    if settings.cors_origin_list:
        kwargs["allow_origins"] = settings.cors_origin_list
    if settings.cors_origin_regex.strip():
        kwargs["allow_origin_regex"] = settings.cors_origin_regex.strip()
    app.add_middleware(CORSMiddleware, **kwargs)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp hardening headers on every response.

    ``Referrer-Policy: no-referrer`` keeps caller addresses in query
    strings from leaking to linked sites.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "no-referrer"
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client request cap over a sliding one-minute window.

    Clients are keyed by the address ``get_client_ip`` resolves. Callers
    with no request in the last minute are dropped from the table, either
    when they return or on the next once-a-minute sweep. Counts live in
    process memory.
    """

    window_seconds = 60.0

    def __init__(
        self,
        app: ASGIApp,
        requests_per_minute: int = 100,
        trusted_proxy_headers: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.trusted_proxy_headers = trusted_proxy_headers
        self._request_counts: dict[str, list[float]] = {}
        self._last_sweep = time.time()

    def _recent_requests(self, client_ip: str, now: float) -> list[float]:
        """Return ``client_ip``'s timestamps inside the window, dropping the key when none remain."""
        window_start = now - self.window_seconds
        recent = [t for t in self._request_counts.get(client_ip, []) if t > window_start]
        if recent:
            self._request_counts[client_ip] = recent
        else:
            self._request_counts.pop(client_ip, None)
        return recent

    def _sweep(self, now: float) -> None:
        """Forget every client whose newest request has left the window."""
        if now - self._last_sweep < self.window_seconds:
            return
        window_start = now - self.window_seconds
        stale = [ip for ip, stamps in self._request_counts.items() if not stamps or stamps[-1] <= window_start]
        for ip in stale:
            del self._request_counts[ip]
        self._last_sweep = now

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client_ip = get_client_ip(request, self.trusted_proxy_headers)
        now = time.time()

        self._sweep(now)
        recent = self._recent_requests(client_ip, now)
        if len(recent) >= self.requests_per_minute:
            return Response(
                content=ErrorEnvelope(error="Rate limit exceeded").model_dump_json(),
                status_code=429,
                media_type="application/json",
                headers={"Retry-After": "60"},
            )

        self._request_counts[client_ip] = [*recent, now]
        return await call_next(request)
