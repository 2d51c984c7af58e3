"""Tests for CORS, security headers, and rate limiting middleware."""

import time
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from election_watch.api.middleware import RateLimitMiddleware, SecurityHeadersMiddleware, get_client_ip, setup_cors
from election_watch.core.config import Settings


def _create_test_app() -> FastAPI:
    """Create a minimal FastAPI app for middleware testing."""
    app = FastAPI()

    @app.get("/test")
    async def test_route() -> dict:
        return {"ok": True}

    return app


def _find_rate_limiter(app: FastAPI) -> RateLimitMiddleware:
    """Walk the built middleware stack down to the rate limiter instance."""
    layer = app.middleware_stack
    while layer is not None and not isinstance(layer, RateLimitMiddleware):
        layer = getattr(layer, "app", None)
    assert layer is not None
    return layer


class TestSecurityHeadersMiddleware:
    """Tests for SecurityHeadersMiddleware."""

    @pytest.fixture
    def client(self) -> TestClient:
        app = _create_test_app()
        app.add_middleware(SecurityHeadersMiddleware)
        return TestClient(app)

    def test_all_security_headers_present(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-XSS-Protection"] == "1; mode=block"
        assert "max-age=31536000" in response.headers["Strict-Transport-Security"]

    def test_referrer_policy_hides_query_strings(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["Referrer-Policy"] == "no-referrer"


class TestCors:
    def test_configured_origin_allowed(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None, cors_origins="http://localhost:3000"))  # type: ignore[call-arg]
        client = TestClient(app)

        response = client.get("/test", headers={"Origin": "http://localhost:3000"})

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_unknown_origin_not_allowed(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None, cors_origins="http://localhost:3000"))  # type: ignore[call-arg]
        client = TestClient(app)

        response = client.get("/test", headers={"Origin": "https://evil.example.com"})

        assert "access-control-allow-origin" not in response.headers

    def test_origin_regex(self) -> None:
        app = _create_test_app()
        settings = Settings(  # type: ignore[call-arg]
            _env_file=None, cors_origins="", cors_origin_regex=r"https://.*\.electionwatch\.example\.org"
        )
        setup_cors(app, settings)
        client = TestClient(app)

        response = client.get("/test", headers={"Origin": "https://preview.electionwatch.example.org"})

        assert response.headers["access-control-allow-origin"] == "https://preview.electionwatch.example.org"


class TestRateLimitMiddleware:
    """Tests for RateLimitMiddleware."""

    @pytest.fixture
    def client(self) -> TestClient:
        app = _create_test_app()
        app.add_middleware(RateLimitMiddleware, requests_per_minute=5)
        return TestClient(app)

    def test_requests_within_limit_succeed(self, client: TestClient) -> None:
        for _ in range(5):
            response = client.get("/test")
            assert response.status_code == 200

    def test_request_over_limit_returns_error_envelope(self, client: TestClient) -> None:
        for _ in range(5):
            client.get("/test")

        response = client.get("/test")

        assert response.status_code == 429
        assert response.json() == {"success": False, "error": "Rate limit exceeded"}
        assert response.headers["Retry-After"] == "60"
        assert "application/json" in response.headers.get("content-type", "")

    def test_rate_limit_window_expires(self) -> None:
        """Old requests outside the 60s window are cleaned up."""
        app = _create_test_app()
        app.add_middleware(RateLimitMiddleware, requests_per_minute=2)
        client = TestClient(app)

        base_time = time.time()

        with patch("election_watch.api.middleware.time.time", return_value=base_time):
            assert client.get("/test").status_code == 200
            assert client.get("/test").status_code == 200
            assert client.get("/test").status_code == 429

        with patch("election_watch.api.middleware.time.time", return_value=base_time + 61):
            assert client.get("/test").status_code == 200

    def test_expired_client_is_forgotten(self) -> None:
        middleware = RateLimitMiddleware(_create_test_app(), requests_per_minute=2)
        middleware._request_counts = {"203.0.113.1": [100.0], "203.0.113.2": [100.0, 150.0]}

        assert middleware._recent_requests("203.0.113.1", 170.0) == []
        assert middleware._recent_requests("203.0.113.2", 170.0) == [150.0]

        assert middleware._request_counts == {"203.0.113.2": [150.0]}

    def test_unseen_client_adds_no_entry_until_request(self) -> None:
        middleware = RateLimitMiddleware(_create_test_app())

        assert middleware._recent_requests("198.51.100.7", time.time()) == []
        assert "198.51.100.7" not in middleware._request_counts

    def test_sweep_forgets_clients_that_never_return(self) -> None:
        middleware = RateLimitMiddleware(_create_test_app())
        middleware._last_sweep = 0.0
        middleware._request_counts = {f"203.0.113.{i}": [10.0] for i in range(20)}
        middleware._request_counts["198.51.100.1"] = [10.0, 55.0]

        middleware._sweep(100.0)

        assert middleware._request_counts == {"198.51.100.1": [10.0, 55.0]}
        assert middleware._last_sweep == 100.0

    def test_sweep_runs_at_most_once_per_window(self) -> None:
        middleware = RateLimitMiddleware(_create_test_app())
        middleware._last_sweep = 90.0
        middleware._request_counts = {"203.0.113.1": [10.0]}

        middleware._sweep(100.0)

        assert "203.0.113.1" in middleware._request_counts

    def test_one_off_clients_swept_on_later_request(self) -> None:
        app = _create_test_app()
        app.add_middleware(RateLimitMiddleware, requests_per_minute=2)
        client = TestClient(app)
        base_time = time.time()

        with patch("election_watch.api.middleware.time.time", return_value=base_time):
            for i in range(5):
                client.get("/test", headers={"CF-Connecting-IP": f"203.0.113.{i}"})
            middleware = _find_rate_limiter(app)
            assert len(middleware._request_counts) == 5

        with patch("election_watch.api.middleware.time.time", return_value=base_time + 61):
            assert client.get("/test", headers={"CF-Connecting-IP": "198.51.100.1"}).status_code == 200

        assert list(middleware._request_counts) == ["198.51.100.1"]

    def test_different_proxy_ips_have_separate_limits(self) -> None:
        app = _create_test_app()
        app.add_middleware(RateLimitMiddleware, requests_per_minute=2)
        client = TestClient(app)

        for _ in range(2):
            assert client.get("/test", headers={"CF-Connecting-IP": "203.0.113.1"}).status_code == 200
        assert client.get("/test", headers={"CF-Connecting-IP": "203.0.113.1"}).status_code == 429
        assert client.get("/test", headers={"CF-Connecting-IP": "203.0.113.2"}).status_code == 200


def _make_request(headers: dict[str, str] | None = None, client_host: str | None = "127.0.0.1") -> Request:
    """Build a minimal Starlette Request with given headers and client address."""
    scope: dict = {
        "type": "http",
        "method": "GET",
        "path": "/test",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
    }
    if client_host is not None:
        scope["client"] = (client_host, 0)
    return Request(scope)


class TestGetClientIp:
    """Tests for the get_client_ip helper function."""

    def test_cf_connecting_ip_takes_priority(self) -> None:
        request = _make_request(
            headers={
                "CF-Connecting-IP": "203.0.113.1",
                "X-Forwarded-For": "198.51.100.1, 10.0.0.1",
                "X-Real-IP": "192.0.2.1",
            }
        )
        assert get_client_ip(request) == "203.0.113.1"

    def test_x_forwarded_for_uses_leftmost_ip(self) -> None:
        request = _make_request(headers={"X-Forwarded-For": "203.0.113.1, 10.0.0.1, 10.0.0.2"})
        assert get_client_ip(request) == "203.0.113.1"

    def test_falls_back_to_client_host(self) -> None:
        request = _make_request(client_host="10.0.0.1")
        assert get_client_ip(request) == "10.0.0.1"

    def test_returns_unknown_when_no_client(self) -> None:
        request = _make_request(headers={}, client_host=None)
        assert get_client_ip(request) == "unknown"

    def test_custom_header_order(self) -> None:
        request = _make_request(headers={"CF-Connecting-IP": "203.0.113.1", "X-Real-IP": "192.0.2.1"})
        assert get_client_ip(request, ["X-Real-IP", "CF-Connecting-IP"]) == "192.0.2.1"
