"""Integration tests for health endpoints."""

import pytest
from httpx import AsyncClient

from notekeeper.core.exceptions import StorageError
from notekeeper.repositories.note import NoteRepository


class _UnreadableStore:
    def load(self):
        raise StorageError("Could not read notes.json")

    def save(self, notes):
        raise StorageError("Could not write notes.json")


@pytest.mark.asyncio
async def test_liveness_always_healthy(client: AsyncClient) -> None:
    """GET /health should always return 200."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_readiness_reports_store(client: AsyncClient) -> None:
    """GET /health/ready should load the collection and report its size."""
    await client.post("/notes", json={"title": "T", "content": "C"})

    response = await client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    store = data["checks"]["store"]
    assert store["status"] == "healthy"
    assert store["records"] == 1
    assert store["latency_ms"] >= 0


@pytest.mark.asyncio
async def test_readiness_initializes_missing_file(client: AsyncClient, data_file) -> None:
    assert not data_file.exists()

    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert data_file.exists()


@pytest.mark.asyncio
async def test_readiness_fails_when_store_unreadable(make_client, api) -> None:
    """GET /health/ready should return 503 in the error envelope."""
    client = await make_client(NoteRepository(_UnreadableStore()))

    response = await client.get("/health/ready")

    data = api.assert_error(response, 503, "HTTP_503")
    assert data["error"]["message"] == "Store unavailable"


@pytest.mark.asyncio
async def test_liveness_ignores_store(make_client) -> None:
    client = await make_client(NoteRepository(_UnreadableStore()))

    response = await client.get("/health")

    assert response.status_code == 200
