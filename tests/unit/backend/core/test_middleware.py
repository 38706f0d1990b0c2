"""
Unit Tests for Request Context Middleware.

Tests the RequestContextMiddleware functionality including:
- Request ID generation and propagation
- Response timing headers
- Structlog context binding
"""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from starlette.requests import Request
from starlette.responses import Response


class TestRequestContextMiddleware:
    """Tests for RequestContextMiddleware."""

    @pytest.fixture
    def middleware(self):
        """Create middleware instance."""
        from modules.backend.core.middleware import RequestContextMiddleware

        mock_app = MagicMock()
        return RequestContextMiddleware(mock_app)

    @pytest.fixture
    def mock_request(self):
        """Create a mock request."""
        request = MagicMock(spec=Request)
        request.headers = {}
        request.method = "GET"
        request.url = MagicMock()
        request.url.path = "/seats/A320/12A"
        request.client = MagicMock()
        request.client.host = "127.0.0.1"
        request.state = SimpleNamespace()
        return request

    # -------------------------------------------------------------------------
    # X-Request-ID Tests
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_generates_request_id_when_not_provided(self, middleware, mock_request):
        """Should generate a UUID request ID when X-Request-ID header is missing."""
        mock_response = Response(content="OK", status_code=200)

        async def call_next(request):
            assert request.state.request_id is not None
            assert len(request.state.request_id) == 36
            return mock_response

        with patch("modules.backend.core.middleware.structlog.contextvars"):
            response = await middleware.dispatch(mock_request, call_next)

        assert len(response.headers["X-Request-ID"]) == 36

    @pytest.mark.asyncio
    async def test_uses_provided_request_id(self, middleware, mock_request):
        """Should use X-Request-ID header when provided."""
        provided_id = "custom-request-id-123"
        mock_request.headers = {"X-Request-ID": provided_id}
        mock_response = Response(content="OK", status_code=200)

        async def call_next(request):
            assert request.state.request_id == provided_id
            return mock_response

        with patch("modules.backend.core.middleware.structlog.contextvars"):
            response = await middleware.dispatch(mock_request, call_next)

        assert response.headers["X-Request-ID"] == provided_id

    # -------------------------------------------------------------------------
    # X-Response-Time Tests
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_adds_response_time_header(self, middleware, mock_request):
        """Should add X-Response-Time header with duration."""
        mock_response = Response(content="OK", status_code=200)

        async def call_next(request):
            return mock_response

        with patch("modules.backend.core.middleware.structlog.contextvars"):
            response = await middleware.dispatch(mock_request, call_next)

        assert response.headers["X-Response-Time"].endswith("ms")

    # -------------------------------------------------------------------------
    # Request State Tests
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_sets_start_time_on_request_state(self, middleware, mock_request):
        """Should set a timezone-naive start_time on request.state."""
        mock_response = Response(content="OK", status_code=200)
        captured_start_time = None

        async def call_next(request):
            nonlocal captured_start_time
            captured_start_time = request.state.start_time
            return mock_response

        with patch("modules.backend.core.middleware.structlog.contextvars"):
            await middleware.dispatch(mock_request, call_next)

        assert isinstance(captured_start_time, datetime)
        assert captured_start_time.tzinfo is None

    # -------------------------------------------------------------------------
    # Structlog Context Tests
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_binds_context_to_structlog(self, middleware, mock_request):
        """Should bind request context to structlog contextvars."""
        mock_request.headers = {"X-Request-ID": "abc"}
        mock_response = Response(content="OK", status_code=200)

        async def call_next(request):
            return mock_response

        with patch("modules.backend.core.middleware.structlog.contextvars") as mock_ctx:
            await middleware.dispatch(mock_request, call_next)

            mock_ctx.bind_contextvars.assert_called_once_with(
                request_id="abc",
                method="GET",
                path="/seats/A320/12A",
            )

    @pytest.mark.asyncio
    async def test_clears_context_after_request(self, middleware, mock_request):
        """Should clear structlog context before and after the request."""
        mock_response = Response(content="OK", status_code=200)

        async def call_next(request):
            return mock_response

        with patch("modules.backend.core.middleware.structlog.contextvars") as mock_ctx:
            await middleware.dispatch(mock_request, call_next)

            assert mock_ctx.clear_contextvars.call_count == 2

    @pytest.mark.asyncio
    async def test_clears_context_on_exception(self, middleware, mock_request):
        """Should clear structlog context and re-raise when the handler fails."""

        async def call_next(request):
            raise RuntimeError("Test error")

        with patch("modules.backend.core.middleware.structlog.contextvars") as mock_ctx:
            with pytest.raises(RuntimeError):
                await middleware.dispatch(mock_request, call_next)

            assert mock_ctx.clear_contextvars.call_count == 2
