"""
Base Repository.

Base class for repositories over a whole-collection store. Records are
soft-deleted: a record with deleted=True stays in the collection but is
invisible to lookups.

Every mutation runs inside `_mutation()`, which holds the repository lock
for the full load → modify → save sequence. Two concurrent mutations in
one process therefore cannot overwrite each other's changes.

Usage:
    class TaskRepository(BaseRepository[Task]):
        record_name = "Task"

        async def close(self, task_id: str) -> Task:
            async with self._mutation() as tasks:
                task = self._get_active(tasks, task_id)
                task.closed = True
            return task
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from notekeeper.core.concurrency import run_blocking
from notekeeper.core.exceptions import NotFoundError
from notekeeper.core.logging import get_logger
from notekeeper.models.base import Record

RecordType = TypeVar("RecordType", bound=Record)


class BaseRepository(Generic[RecordType]):
    """
    Collection access shared by all repositories.

    Subclasses set `record_name`, used in not-found messages.
    """

    record_name: str = "Record"

    def __init__(self, store: Any) -> None:
        self.store = store
        self._lock = asyncio.Lock()
        self._logger = get_logger(self.__class__.__module__)

    async def _load(self) -> list[RecordType]:
        """Load the collection on the I/O pool."""
        return await run_blocking(self.store.load)

    async def _save(self, records: list[RecordType]) -> None:
        """Persist the collection on the I/O pool."""
        await run_blocking(self.store.save, records)

    @asynccontextmanager
    async def _mutation(self) -> AsyncIterator[list[RecordType]]:
        """
        Load the collection under the lock and save it on clean exit.

        If the body raises, nothing is saved and the store keeps the
        state it had before the operation.
        """
        async with self._lock:
            records = await self._load()
            yield records
            await self._save(records)

    def _get_active(self, records: list[RecordType], id: str) -> RecordType:
        """
        Find a visible record by ID.

        Raises:
            NotFoundError: If no record has this ID or it is soft-deleted
        """
        for record in records:
            if record.id == id:
                if record.deleted:
                    break
                return record
        raise NotFoundError(f"{self.record_name} not found")

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Log a mutating operation with context."""
        self._logger.info(
            operation,
            extra={"repository": self.__class__.__name__, **context},
        )

    def _log_debug(self, message: str, **context: Any) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"repository": self.__class__.__name__, **context},
        )
