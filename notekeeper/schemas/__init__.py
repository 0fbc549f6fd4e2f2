# Request/response schemas package

from notekeeper.schemas.base import ApiResponse, ErrorDetail, ErrorResponse, ResponseMetadata
from notekeeper.schemas.note import DeleteAck, NoteInput, NotePage, PageInfo

__all__ = [
    "ApiResponse",
    "DeleteAck",
    "ErrorDetail",
    "ErrorResponse",
    "NoteInput",
    "NotePage",
    "PageInfo",
    "ResponseMetadata",
]
