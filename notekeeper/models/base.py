"""
Record Base Model.

Base class for all persisted records with common fields and utilities.
Records are stored as JSON using camelCase field names.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Return current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a fresh record identifier."""
    return str(uuid4())


class Record(BaseModel):
    """
    Base class for persisted records.

    Attributes are snake_case in Python and camelCase on disk and on
    the wire. Assignment is validated so in-place edits keep the types.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )
