"""
Note Repository.

The five note operations over an injected store: list with filtering,
search and pagination; get; create; update; soft delete.
"""

from typing import Any

from notekeeper.core.exceptions import ValidationError
from notekeeper.core.pagination import DEFAULT_LIMIT, PagedResult, PageParams, paginate
from notekeeper.core.store import NoteStore
from notekeeper.core.validation import validate_note
from notekeeper.models.note import Note
from notekeeper.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for notes.

    Collection order is insertion order and is never changed, so it is
    also the listing order.
    """

    record_name = "Note"

    def __init__(
        self,
        store: NoteStore,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int | None = None,
    ) -> None:
        super().__init__(store)
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def list_notes(
        self,
        page: Any = None,
        limit: Any = None,
        search: str | None = None,
        include_deleted: bool = False,
    ) -> PagedResult[Note]:
        """
        List notes.

        Filters run before pagination, in this order: soft-deleted notes
        are dropped unless `include_deleted`, then `search` keeps notes
        whose title or content contains the term, ignoring case.

        Args:
            page: Page number; unusable values mean page 1
            limit: Page size; unusable values mean the default limit
            search: Substring to look for; empty or None disables search
            include_deleted: Whether soft-deleted notes are listed

        Returns:
            The requested page with totals over the filtered notes
        """
        params = PageParams.from_raw(
            page,
            limit,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )
        notes = await self._load()

        if not include_deleted:
            notes = [note for note in notes if not note.deleted]
        if search:
            notes = [note for note in notes if note.matches(search)]

        result = paginate(notes, params)
        self._log_debug(
            "Listed notes",
            page=result.page,
            limit=result.limit,
            total=result.total,
            search=search,
            include_deleted=include_deleted,
        )
        return result

    async def get_note(self, note_id: str) -> Note:
        """
        Get a visible note by ID.

        Raises:
            NotFoundError: If the note does not exist or is soft-deleted
        """
        notes = await self._load()
        return self._get_active(notes, note_id)

    async def create_note(self, title: Any, content: Any) -> Note:
        """
        Create a note from a title and content.

        Args:
            title: Note title, trimmed before storing
            content: Note content, trimmed before storing

        Returns:
            The stored note

        Raises:
            ValidationError: If the fields are invalid; nothing is stored
        """
        self._validate(title, content)

        note = Note.new(title.strip(), content.strip())
        async with self._mutation() as notes:
            notes.append(note)

        self._log_operation("Note created", note_id=note.id)
        return note

    async def update_note(self, note_id: str, title: Any, content: Any) -> Note:
        """
        Replace the title and content of a visible note.

        Validation runs before the lookup, so invalid input is reported
        even for an unknown ID. id, created_at and deleted are kept.

        Raises:
            ValidationError: If the fields are invalid
            NotFoundError: If the note does not exist or is soft-deleted
        """
        self._validate(title, content)

        async with self._mutation() as notes:
            note = self._get_active(notes, note_id)
            note.title = title.strip()
            note.content = content.strip()

        self._log_operation("Note updated", note_id=note_id)
        return note

    async def delete_note(self, note_id: str) -> None:
        """
        Soft-delete a note.

        Deleting an already deleted note is rejected, not ignored.

        Raises:
            NotFoundError: If the note does not exist or is already deleted
        """
        async with self._mutation() as notes:
            note = self._get_active(notes, note_id)
            note.deleted = True

        self._log_operation("Note deleted", note_id=note_id)

    def _validate(self, title: Any, content: Any) -> None:
        violations = validate_note(title, content)
        if violations:
            self._log_debug("Note rejected", violations=violations)
            raise ValidationError("Validation failed", violations=violations)
