"""
Integration Test Fixtures.

Fixtures for integration tests - the full FastAPI app over a real JSON
file store under tmp_path. These fixtures build on the root conftest.py
store fixtures.
"""

from collections.abc import AsyncGenerator
from contextlib import AsyncExitStack
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from notekeeper.main import create_app
from notekeeper.repositories.note import NoteRepository


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def app(note_repository: NoteRepository) -> FastAPI:
    """Application serving the temp-file repository."""
    return create_app(note_repository=note_repository)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client for the app.

    Every test gets its own data file, so tests never see each
    other's notes.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client


@pytest.fixture
async def make_client() -> AsyncGenerator[Any, None]:
    """
    Factory for clients over a custom repository.

    Use this for stores that fail or are pre-seeded. Pass
    raise_app_exceptions=False to inspect 500 responses for errors
    that Starlette re-raises after handling.

    Usage:
        async def test_broken_store(make_client, make_store):
            client = await make_client(NoteRepository(make_store(...)))
    """
    async with AsyncExitStack() as stack:

        async def _make(repository: NoteRepository, **transport_kwargs: Any) -> AsyncClient:
            app = create_app(note_repository=repository)
            return await stack.enter_async_context(
                AsyncClient(
                    transport=ASGITransport(app=app, **transport_kwargs),
                    base_url="http://test",
                )
            )

        yield _make


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> dict[str, Any]:
        """
        Assert API response is successful.

        Args:
            response: httpx Response object
            expected_status: Expected HTTP status code

        Returns:
            Response JSON data

        Raises:
            AssertionError: If response is not successful
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is True, f"Response not successful: {data}"
        return data

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error.

        Args:
            response: httpx Response object
            expected_status: Expected HTTP status code
            expected_code: Expected error code (optional)

        Returns:
            Response JSON data

        Raises:
            AssertionError: If response is not an error or codes don't match
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert data.get("error") is not None, f"Missing error details: {data}"

        if expected_code:
            actual_code = data["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )

        return data

    @staticmethod
    def assert_violations(response: Any, *expected: str) -> dict[str, Any]:
        """
        Assert API response is a note validation failure (400).

        Args:
            response: httpx Response object
            expected: Violation messages, in order

        Returns:
            Response JSON data
        """
        data = ApiAssertions.assert_error(response, 400, "VAL_VALIDATION_ERROR")
        violations = data["error"].get("details", {}).get("violations", [])
        assert violations == list(expected), f"Unexpected violations: {violations}"
        return data

    @staticmethod
    def assert_request_invalid(
        response: Any,
        field: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is a malformed-request error (422).

        Args:
            response: httpx Response object
            field: Expected field with validation error (optional)

        Returns:
            Response JSON data
        """
        data = ApiAssertions.assert_error(response, 422, "VAL_REQUEST_INVALID")

        if field:
            errors = data["error"].get("details", {}).get("validation_errors", [])
            fields = [e.get("field", "") for e in errors]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )

        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
