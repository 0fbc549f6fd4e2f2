"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Storage:
    Tests never touch the configured data file. Each test gets its own
    JSON file under pytest's tmp_path, or an in-memory store double.
"""

import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from notekeeper.core.store import JsonFileStore
from notekeeper.models.note import Note
from notekeeper.repositories.note import NoteRepository


# =============================================================================
# Store Doubles
# =============================================================================


class MemoryStore:
    """
    In-memory NoteStore.

    Hands out deep copies so repository edits never reach the stored
    collection without a save, the same as with a file.

    Args:
        notes: Initial collection
        load_delay: Seconds each load blocks, to widen race windows
        fail_on_save: Exception raised by save instead of storing
    """

    def __init__(
        self,
        notes: Sequence[Note] | None = None,
        load_delay: float = 0.0,
        fail_on_save: Exception | None = None,
    ) -> None:
        self._notes = [note.model_copy(deep=True) for note in notes or []]
        self.load_delay = load_delay
        self.fail_on_save = fail_on_save
        self.load_calls = 0
        self.save_calls = 0

    def load(self) -> list[Note]:
        self.load_calls += 1
        snapshot = [note.model_copy(deep=True) for note in self._notes]
        if self.load_delay:
            time.sleep(self.load_delay)
        return snapshot

    def save(self, notes: Sequence[Note]) -> None:
        self.save_calls += 1
        if self.fail_on_save is not None:
            raise self.fail_on_save
        self._notes = [note.model_copy(deep=True) for note in notes]

    @property
    def notes(self) -> list[Note]:
        """Current stored collection."""
        return list(self._notes)


# =============================================================================
# Store and Repository Fixtures
# =============================================================================


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a notes data file that does not exist yet."""
    return tmp_path / "data" / "notes.json"


@pytest.fixture
def file_store(data_file: Path) -> JsonFileStore:
    """JSON file store on a fresh temp file."""
    return JsonFileStore(data_file)


@pytest.fixture
def memory_store() -> MemoryStore:
    """Empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def make_store() -> type[MemoryStore]:
    """
    MemoryStore constructor for tests that need a seeded or faulty store.

    Usage:
        store = make_store(notes, load_delay=0.01)
    """
    return MemoryStore


@pytest.fixture
def note_repository(file_store: JsonFileStore) -> NoteRepository:
    """
    NoteRepository over a temp JSON file.

    Usage:
        async def test_create(note_repository: NoteRepository):
            note = await note_repository.create_note("Title", "Body")
            assert note.deleted is False
    """
    return NoteRepository(file_store)


@pytest.fixture
def make_notes():
    """
    Factory that builds a list of notes with predictable titles.

    Usage:
        notes = make_notes(3)                      # "Note 1".."Note 3"
        notes = make_notes(2, deleted={1})         # second note deleted
    """

    def _make(count: int, deleted: set[int] | None = None, **fields: Any) -> list[Note]:
        deleted = deleted or set()
        return [
            Note.new(
                fields.get("title", f"Note {i + 1}"),
                fields.get("content", f"Content {i + 1}"),
                deleted=i in deleted,
            )
            for i in range(count)
        ]

    return _make


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"
