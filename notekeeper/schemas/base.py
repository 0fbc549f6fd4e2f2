"""
Response Envelope.

Every /notes response, success or failure, is an object of the form
{"success", "data", "error", "metadata"}; exactly one of data and error
is set.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from notekeeper.models.base import utc_now

DataT = TypeVar("DataT")


class ResponseMetadata(BaseModel):
    timestamp: datetime = Field(default_factory=utc_now)
    request_id: str | None = None


class ErrorDetail(BaseModel):
    """Machine-readable code, human message, and e.g. {"violations": [...]}."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ApiResponse(BaseModel, Generic[DataT]):
    """Successful response carrying `data`."""

    success: bool = True
    data: DataT | None = None
    error: ErrorDetail | None = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def of(cls, data: Any, request_id: str | None = None) -> "ApiResponse":
        return cls(data=data, metadata=ResponseMetadata(request_id=request_id))


class ErrorResponse(BaseModel):
    """Failed response; built only by the exception handlers."""

    success: bool = False
    data: None = None
    error: ErrorDetail
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)
