"""
Notes API Endpoints.

REST API endpoints for note management.
"""

from fastapi import APIRouter, Query

from notekeeper.core.dependencies import NoteRepo, RequestId
from notekeeper.models.note import Note
from notekeeper.schemas.base import ApiResponse
from notekeeper.schemas.note import DeleteAck, NoteInput, NotePage

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[NotePage],
    summary="List notes (paginated)",
    description="List notes in creation order with optional search and soft-deleted notes.",
)
async def list_notes(
    repo: NoteRepo,
    request_id: RequestId,
    page: str | None = Query(default=None, description="Page number, 1-based"),
    limit: str | None = Query(default=None, description="Page size"),
    search: str | None = Query(
        default=None,
        description="Case-insensitive substring of title or content",
    ),
    include_deleted: str | None = Query(
        default=None,
        alias="includeDeleted",
        description='"true" to include soft-deleted notes',
    ),
) -> ApiResponse[NotePage]:
    """List notes with search and pagination."""
    result = await repo.list_notes(
        page=page,
        limit=limit,
        search=search,
        include_deleted=include_deleted == "true",
    )
    return ApiResponse.of(NotePage.from_result(result), request_id)


@router.get(
    "/{note_id}",
    response_model=ApiResponse[Note],
    summary="Get a note",
    description="Get a single note by ID. Soft-deleted notes are not found.",
)
async def get_note(
    note_id: str,
    repo: NoteRepo,
    request_id: RequestId,
) -> ApiResponse[Note]:
    """Get a note by ID."""
    note = await repo.get_note(note_id)
    return ApiResponse.of(note, request_id)


@router.post(
    "",
    response_model=ApiResponse[Note],
    status_code=201,
    summary="Create a note",
    description="Create a new note with a title and content.",
)
async def create_note(
    repo: NoteRepo,
    request_id: RequestId,
    data: NoteInput | None = None,
) -> ApiResponse[Note]:
    """Create a new note."""
    data = data or NoteInput()
    note = await repo.create_note(data.title, data.content)
    return ApiResponse.of(note, request_id)


@router.put(
    "/{note_id}",
    response_model=ApiResponse[Note],
    summary="Update a note",
    description="Replace the title and content of an existing note.",
)
async def update_note(
    note_id: str,
    repo: NoteRepo,
    request_id: RequestId,
    data: NoteInput | None = None,
) -> ApiResponse[Note]:
    """Update a note."""
    data = data or NoteInput()
    note = await repo.update_note(note_id, data.title, data.content)
    return ApiResponse.of(note, request_id)


@router.delete(
    "/{note_id}",
    response_model=ApiResponse[DeleteAck],
    summary="Delete a note",
    description="Soft-delete a note. Deleting it again returns 404.",
)
async def delete_note(
    note_id: str,
    repo: NoteRepo,
    request_id: RequestId,
) -> ApiResponse[DeleteAck]:
    """Soft-delete a note."""
    await repo.delete_note(note_id)
    return ApiResponse.of(DeleteAck(), request_id)
