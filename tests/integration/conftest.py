"""
Integration Test Fixtures.

Fixtures for integration tests - uses the real application wired to the
test database. These fixtures build on the root conftest.py database
fixtures.
"""

from collections.abc import AsyncGenerator, Generator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.database import get_db_session


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(db_session: AsyncSession) -> Generator[FastAPI, None, None]:
    """
    Application with the database session dependency overridden.

    Every request shares the test session, so whatever a request writes
    is rolled back with the test.
    """
    from modules.backend.main import create_app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    application = create_app()
    application.dependency_overrides[get_db_session] = override_get_db_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the test database.

    Usage:
        async def test_get_seat(client: AsyncClient, seeded_seats):
            response = await client.get("/seats/A320/12A")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client


@pytest.fixture
async def lenient_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Test client that returns 500 responses instead of re-raising.

    Starlette re-raises unhandled exceptions after the catch-all handler
    has rendered its response; this client keeps that response.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_ok(response: Any, expected_status: int = 200) -> Any:
        """
        Assert API response is successful and return its JSON body.

        Raises:
            AssertionError: If the status code differs
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        return response.json()

    @staticmethod
    def assert_problem(
        response: Any,
        expected_status: int,
        expected_detail: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is a problem document with the given status.

        Returns:
            Problem document

        Raises:
            AssertionError: If the response is not a matching problem document
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        assert response.headers["content-type"].startswith("application/problem+json")

        problem = response.json()
        assert problem["status"] == expected_status
        assert problem["type"] == f"https://httpstatuses.com/{expected_status}"
        assert problem["title"]
        assert problem["instance"] == response.request.url.path
        # 500s are rendered outside the request middleware and carry no header
        if "x-request-id" in response.headers:
            assert problem["traceId"] == response.headers["x-request-id"]

        if expected_detail is not None:
            assert problem["detail"] == expected_detail, (
                f"Expected detail {expected_detail!r}, got {problem['detail']!r}"
            )

        return problem


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
