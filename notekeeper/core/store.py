"""
Note Store.

Durable storage for the note collection. The whole collection is loaded
and saved as one unit; there is no per-record access and no caching.

JsonFileStore keeps the collection in a single pretty-printed JSON array.
Writes go through a synced temp file in the same directory. Saves then
replace() the data file, so readers never see a partial write. First-run
creation links the temp file into place and leaves an existing file alone.

Usage:
    from notekeeper.core.store import JsonFileStore

    store = JsonFileStore(Path("data/notes.json"))
    notes = store.load()
    notes.append(note)
    store.save(notes)
"""

import os
import uuid
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from notekeeper.core.exceptions import CorruptStateError, StorageError
from notekeeper.core.logging import get_logger
from notekeeper.models.note import Note

logger = get_logger(__name__)

_COLLECTION = TypeAdapter(list[Note])


class NoteStore(Protocol):
    """Whole-collection load/save of note records."""

    def load(self) -> list[Note]:
        """Return the full collection, initializing it when absent."""
        ...

    def save(self, notes: Sequence[Note]) -> None:
        """Replace the persisted collection with `notes`."""
        ...


class JsonFileStore:
    """Note collection persisted as one JSON file."""

    def __init__(self, path: Path, indent: int = 2) -> None:
        self.path = Path(path)
        self.indent = indent or None

    def load(self) -> list[Note]:
        """
        Read the full collection from disk.

        A missing file is the first-run case: an empty collection is
        created, unless another writer creates the file first, and the
        file is then read as usual.

        Raises:
            StorageError: If the file cannot be read
            CorruptStateError: If the file is not a valid note collection
        """
        try:
            raw = self._read()
        except FileNotFoundError:
            logger.info(
                "Data file missing, initializing empty collection",
                extra={"path": str(self.path)},
            )
            self._initialize()
            raw = self._read()

        try:
            notes = _COLLECTION.validate_json(raw)
        except PydanticValidationError as e:
            logger.error(
                "Data file is corrupt",
                extra={"path": str(self.path), "error_count": e.error_count()},
            )
            raise CorruptStateError(f"{self.path.name} is not a valid note collection") from e

        logger.debug("Collection loaded", extra={"path": str(self.path), "count": len(notes)})
        return notes

    def save(self, notes: Sequence[Note]) -> None:
        """
        Atomically replace the file with the given collection.

        On failure the temp file is removed and the old file is untouched.

        Raises:
            StorageError: If the collection cannot be written
        """
        try:
            with self._staged(list(notes)) as tmp_path:
                tmp_path.replace(self.path)
        except OSError as e:
            logger.error(
                "Failed to write data file",
                extra={"path": str(self.path), "error": str(e)},
            )
            raise StorageError(f"Could not write {self.path.name}") from e

        logger.debug("Collection saved", extra={"path": str(self.path), "count": len(notes)})

    def _read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            raise
        except OSError as e:
            logger.error(
                "Failed to read data file",
                extra={"path": str(self.path), "error": str(e)},
            )
            raise StorageError(f"Could not read {self.path.name}") from e

    def _initialize(self) -> None:
        """
        Create the file holding an empty collection if it does not exist.

        link() fails when the target exists, so a file written by a
        concurrent save is never replaced.
        """
        try:
            with self._staged([]) as tmp_path:
                os.link(tmp_path, self.path)
        except FileExistsError:
            logger.debug("Data file already created", extra={"path": str(self.path)})
        except OSError as e:
            logger.error(
                "Failed to create data file",
                extra={"path": str(self.path), "error": str(e)},
            )
            raise StorageError(f"Could not create {self.path.name}") from e

    @contextmanager
    def _staged(self, notes: list[Note]) -> Iterator[Path]:
        """Write the collection to a synced temp file next to the data file."""
        payload = _COLLECTION.dump_json(notes, indent=self.indent, by_alias=True)
        tmp_path = self.path.parent / f".{self.path.name}.tmp-{uuid.uuid4().hex}"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            yield tmp_path
        finally:
            tmp_path.unlink(missing_ok=True)
