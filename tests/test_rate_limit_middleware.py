"""Behavior-focused tests for rate limiting middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from home_dashboard.adapters.web.rate_limit_middleware import (
    RateLimitMiddleware,
    extract_client_ip,
    retry_after_seconds,
)


def make_request(host: str | None = "10.0.0.1", path: str = "/api/transport") -> MagicMock:
    request = MagicMock()
    request.headers = {}
    request.url.path = path
    if host is None:
        request.client = None
    else:
        request.client = MagicMock()
        request.client.host = host
    return request


class TestExtractClientIp:
    """Tests for client IP extraction behavior."""

    def test_when_x_forwarded_for_has_chain_then_returns_first_ip(self) -> None:
        """Given X-Forwarded-For with IP chain, when extracting, then returns original client IP."""
        request = make_request(host=None)
        request.headers = {"X-Forwarded-For": "  203.0.113.50 , 70.41.3.18, 150.172.238.178"}

        assert extract_client_ip(request) == "203.0.113.50"

    def test_when_no_x_forwarded_for_then_uses_direct_client_ip(self) -> None:
        """Given no X-Forwarded-For, when extracting, then uses direct connection IP."""
        assert extract_client_ip(make_request(host="192.168.1.100")) == "192.168.1.100"

    def test_when_x_forwarded_for_empty_then_uses_direct_client_ip(self) -> None:
        """Given empty X-Forwarded-For, when extracting, then falls back to direct IP."""
        request = make_request(host="192.168.1.100")
        request.headers = {"X-Forwarded-For": ""}

        assert extract_client_ip(request) == "192.168.1.100"

    def test_when_no_client_info_available_then_returns_unknown(self) -> None:
        """Given no client information, when extracting, then returns 'unknown'."""
        assert extract_client_ip(make_request(host=None)) == "unknown"


class TestRetryAfterSeconds:
    """Tests for retry_after extraction from rate limit results."""

    def test_when_result_has_state_with_retry_after_then_extracts_it(self) -> None:
        """Given result with state.retry_after, when extracting, then returns that value."""
        result = MagicMock()
        result.state.retry_after = 45.5

        assert retry_after_seconds(result) == 45.5

    def test_when_result_has_direct_retry_after_then_extracts_it(self) -> None:
        """Given result with direct retry_after, when extracting, then returns that value."""
        result = MagicMock(spec=["retry_after"])
        result.retry_after = 30.0

        assert retry_after_seconds(result) == 30.0

    def test_when_result_has_no_retry_after_then_returns_default(self) -> None:
        """Given result without retry_after, when extracting, then returns 60 seconds."""
        assert retry_after_seconds(MagicMock(spec=[])) == 60.0


class TestRateLimitMiddlewareDispatch:
    """Tests for rate limit middleware dispatch behavior."""

    @pytest.mark.asyncio
    async def test_within_limit_requests_pass_through(self) -> None:
        """Given a client within its quota, when dispatching, then the app answers."""
        middleware = RateLimitMiddleware(app=MagicMock(), requests_per_minute=10)
        request = make_request()
        expected_response = MagicMock()
        call_next = AsyncMock(return_value=expected_response)

        response = await middleware.dispatch(request, call_next)

        assert response == expected_response
        call_next.assert_called_once_with(request)

    @pytest.mark.asyncio
    async def test_exceeding_limit_returns_429(self) -> None:
        """Given a client over its quota, when dispatching, then 429 with Retry-After."""
        middleware = RateLimitMiddleware(app=MagicMock(), requests_per_minute=2)
        call_next = AsyncMock(return_value=MagicMock())

        for _ in range(2):
            await middleware.dispatch(make_request(), call_next)
        response = await middleware.dispatch(make_request(), call_next)

        assert response.status_code == 429
        assert int(response.headers["Retry-After"]) >= 0
        assert b"Rate limit exceeded" in response.body
        assert call_next.call_count == 2

    @pytest.mark.asyncio
    async def test_clients_are_limited_separately(self) -> None:
        """Given one client over its quota, when another client calls, then it passes."""
        middleware = RateLimitMiddleware(app=MagicMock(), requests_per_minute=1)
        call_next = AsyncMock(return_value=MagicMock())

        await middleware.dispatch(make_request(host="10.0.0.1"), call_next)
        limited = await middleware.dispatch(make_request(host="10.0.0.1"), call_next)
        other = await middleware.dispatch(make_request(host="10.0.0.2"), call_next)

        assert limited.status_code == 429
        assert other is call_next.return_value

    @pytest.mark.asyncio
    async def test_health_check_is_never_limited(self) -> None:
        """Given an exhausted quota, when calling /healthz, then it still passes."""
        middleware = RateLimitMiddleware(app=MagicMock(), requests_per_minute=1)
        call_next = AsyncMock(return_value=MagicMock())

        for _ in range(3):
            response = await middleware.dispatch(make_request(path="/healthz"), call_next)

        assert response is call_next.return_value
        assert call_next.call_count == 3
