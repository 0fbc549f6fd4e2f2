"""
Note Schemas.

Pydantic schemas for note API request/response bodies.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from notekeeper.core.pagination import PagedResult
from notekeeper.models.note import Note


class NoteInput(BaseModel):
    """
    Body for creating or updating a note.

    Fields accept any JSON type so that type and emptiness checks are
    reported by note validation as violations, not as request errors.
    Unknown fields are ignored.
    """

    title: Any = Field(default=None, description="Note title", examples=["Project Plan"])
    content: Any = Field(
        default=None,
        description="Note content",
        examples=["Define MVP and deadlines"],
    )

    model_config = ConfigDict(extra="ignore")


class PageInfo(BaseModel):
    """Pagination metadata for a note listing."""

    page: int
    limit: int
    total: int
    total_pages: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotePage(BaseModel):
    """One page of notes."""

    items: list[Note]
    pagination: PageInfo

    @classmethod
    def from_result(cls, result: PagedResult[Note]) -> "NotePage":
        """Build the response body from a repository listing."""
        return cls(
            items=result.items,
            pagination=PageInfo(
                page=result.page,
                limit=result.limit,
                total=result.total,
                total_pages=result.total_pages,
            ),
        )


class DeleteAck(BaseModel):
    """Acknowledgement returned after a soft delete."""

    message: str = "Note deleted successfully"
