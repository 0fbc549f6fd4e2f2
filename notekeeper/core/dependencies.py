"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Request

from notekeeper.core.config import get_app_config, get_data_file_path
from notekeeper.core.store import JsonFileStore
from notekeeper.repositories.note import NoteRepository


def build_note_repository() -> NoteRepository:
    """Create the note repository over the configured JSON data file."""
    app_config = get_app_config()
    store = JsonFileStore(
        get_data_file_path(),
        indent=app_config.storage.indent,
    )
    pagination = app_config.application.pagination
    return NoteRepository(
        store,
        default_limit=pagination.default_limit,
        max_limit=pagination.max_limit,
    )


def get_note_repository(request: Request) -> NoteRepository:
    """
    Return the application's note repository.

    One repository is shared by all requests so that its lock
    serializes every mutation of the collection.
    """
    return request.app.state.note_repository


NoteRepo = Annotated[NoteRepository, Depends(get_note_repository)]


async def get_request_id(request: Request) -> str:
    """
    Return the request ID set by RequestContextMiddleware.

    Falls back to the X-Request-ID header, then to a fresh ID.
    """
    state_id = getattr(request.state, "request_id", None)
    return state_id or request.headers.get("x-request-id") or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]
