"""
Note Model.

The persisted note record. Notes are soft-deleted: the deleted flag goes
from False to True once and the record stays in the collection.
"""

from datetime import datetime

from notekeeper.models.base import Record, new_id, utc_now


class Note(Record):
    """
    Note record.

    Persisted as {"id", "title", "content", "createdAt", "deleted"}.
    Every field is required, so a stored record missing one fails to
    decode. Use Note.new() to build a fresh note.
    """

    id: str
    title: str
    content: str
    created_at: datetime
    deleted: bool

    @classmethod
    def new(cls, title: str, content: str, deleted: bool = False) -> "Note":
        """Build a note with a generated id and the current UTC time."""
        return cls(
            id=new_id(),
            title=title,
            content=content,
            created_at=utc_now(),
            deleted=deleted,
        )

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on title or content."""
        needle = term.lower()
        return needle in self.title.lower() or needle in self.content.lower()

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, deleted={self.deleted})>"
