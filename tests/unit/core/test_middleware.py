"""
Unit Tests for Request Context Middleware.

Runs a minimal Starlette app through the middleware.
"""

import pytest
import structlog
from httpx import ASGITransport, AsyncClient
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from notes_api.core.middleware import RequestContextMiddleware


async def _echo_context(request: Request) -> JSONResponse:
    return JSONResponse(
        {
            "state_request_id": request.state.request_id,
            "context": structlog.contextvars.get_contextvars(),
        }
    )


@pytest.fixture
async def client():
    app = Starlette(routes=[Route("/echo", _echo_context)])
    app.add_middleware(RequestContextMiddleware)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client


class TestRequestContextMiddleware:
    """Tests for request ID and timing headers."""

    @pytest.mark.asyncio
    async def test_generates_request_id(self, client):
        """Should create an ID when the caller sends none."""
        response = await client.get("/echo")

        request_id = response.headers["X-Request-ID"]
        assert request_id
        assert response.json()["state_request_id"] == request_id

    @pytest.mark.asyncio
    async def test_propagates_request_id(self, client):
        """Should reuse the caller's X-Request-ID."""
        response = await client.get("/echo", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    @pytest.mark.asyncio
    async def test_binds_log_context(self, client):
        """Should bind request_id, method and path for logging."""
        response = await client.get("/echo", headers={"X-Request-ID": "ctx-1"})

        context = response.json()["context"]
        assert context["request_id"] == "ctx-1"
        assert context["method"] == "GET"
        assert context["path"] == "/echo"

    @pytest.mark.asyncio
    async def test_reports_response_time(self, client):
        """Should add an X-Response-Time header in milliseconds."""
        response = await client.get("/echo")

        assert response.headers["X-Response-Time"].endswith("ms")
