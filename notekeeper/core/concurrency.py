"""
Concurrency Infrastructure.

Thread pool for blocking file I/O. The pool is created lazily on first
access and cleaned up during shutdown. Sizing is configured in
config/settings/concurrency.yaml.

Usage:
    from notekeeper.core.concurrency import run_blocking

    # Run blocking code in thread pool (preserves structlog context)
    notes = await run_blocking(store.load)
"""

import asyncio
import contextvars
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from notekeeper.core.logging import get_logger

logger = get_logger(__name__)

_io_pool: ThreadPoolExecutor | None = None


class TracedThreadPoolExecutor(ThreadPoolExecutor):
    """ThreadPoolExecutor that propagates contextvars to worker threads.

    Standard ThreadPoolExecutor does not carry structlog context or the
    request_id into worker threads. This subclass copies the current
    context before dispatching, so log records from store I/O keep it.
    """

    def submit(self, fn, /, *args, **kwargs):
        ctx = contextvars.copy_context()
        return super().submit(ctx.run, fn, *args, **kwargs)


def get_io_pool() -> TracedThreadPoolExecutor:
    """Get the shared thread pool for blocking I/O operations.

    Creates the pool lazily on first call using config from concurrency.yaml.
    """
    global _io_pool
    if _io_pool is None:
        from notekeeper.core.config import get_app_config
        max_workers = get_app_config().concurrency.thread_pool.max_workers
        _io_pool = TracedThreadPoolExecutor(max_workers=max_workers)
        logger.info("Thread pool created", extra={"max_workers": max_workers})
    return _io_pool


async def run_blocking(fn: Callable[..., Any], *args: Any) -> Any:
    """Run a blocking callable on the I/O pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_io_pool(), fn, *args)


async def shutdown_pools() -> None:
    """Shut down the I/O pool. Called during application shutdown.

    Pool shutdown is blocking, so it runs in a thread to avoid stalling
    the event loop during graceful shutdown.
    """
    global _io_pool

    if _io_pool is not None:
        await asyncio.to_thread(_io_pool.shutdown, wait=True)
        logger.info("Thread pool shut down")
        _io_pool = None
