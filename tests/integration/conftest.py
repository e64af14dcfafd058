"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real database and the full app.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notes_api.core.database import get_db_session


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(
    db_session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the test database.

    Each request gets its own session that commits on success and rolls
    back on error, the same as in production, so a failed insert does
    not undo earlier requests in the same test.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    from notes_api.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> dict[str, Any]:
        """
        Assert API response is successful.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("status") == "success", f"Response not successful: {data}"
        return data

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_message: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error envelope.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        expected_label = "error" if expected_status >= 500 else "fail"
        assert data.get("status") == expected_label, f"Wrong status label: {data}"
        assert data.get("message"), f"Missing error message: {data}"

        if expected_message:
            assert data["message"] == expected_message

        return data

    @staticmethod
    def assert_validation_error(
        response: Any,
        field: str | None = None,
        tag: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is a validation error (400 with violations).

        Args:
            field: Fully-qualified field expected among the violations
            tag: Rule expected to have failed on that field
        """
        data = ApiAssertions.assert_error(response, 400)
        errors = data.get("errors", [])
        assert errors, f"Missing violations: {data}"

        if field:
            matching = [e for e in errors if e["field"] == field]
            assert matching, (
                f"Expected violation for '{field}', "
                f"got: {[e['field'] for e in errors]}"
            )
            if tag:
                assert matching[0]["tag"] == tag

        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
