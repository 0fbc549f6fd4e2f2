"""
Health Check Endpoints.

Provides liveness and readiness checks.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (notes data file readable)
"""

import time
from typing import Any

from fastapi import APIRouter, HTTPException

from notekeeper.core.concurrency import run_blocking
from notekeeper.core.dependencies import NoteRepo
from notekeeper.core.exceptions import StorageError
from notekeeper.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


async def check_store(repo: Any) -> dict[str, Any]:
    """
    Check that the notes collection can be loaded.

    Returns:
        Dict with status, latency, and record count or error code
    """
    started = time.perf_counter()
    try:
        notes = await run_blocking(repo.store.load)
    except StorageError as e:
        logger.warning("Store health check failed", extra={"code": e.code})
        return {"status": "unhealthy", "error": e.code}

    return {
        "status": "healthy",
        "latency_ms": int((time.perf_counter() - started) * 1000),
        "records": len(notes),
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(repo: NoteRepo) -> dict[str, Any]:
    """
    Readiness check.

    Returns 200 if the notes data file can be loaded, 503 otherwise.
    """
    store_status = await check_store(repo)
    if store_status["status"] != "healthy":
        raise HTTPException(status_code=503, detail="Store unavailable")
    return {"status": "ready", "checks": {"store": store_status}}
