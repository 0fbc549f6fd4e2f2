"""
Note Validation.

Field checks for note title and content. Returns the list of violations
instead of raising, so callers can report every problem at once.
"""

from typing import Any

TITLE_MAX_LENGTH = 100

TITLE_REQUIRED = "Title is required and must be a non-empty string"
TITLE_TOO_LONG = f"Title must be {TITLE_MAX_LENGTH} characters or less"
CONTENT_REQUIRED = "Content is required and must be a non-empty string"


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_note(title: Any, content: Any) -> list[str]:
    """
    Check a title/content pair.

    Args:
        title: Raw title from the caller, any type
        content: Raw content from the caller, any type

    Returns:
        Violation messages; empty when the pair is valid
    """
    violations = []

    if _is_blank(title):
        violations.append(TITLE_REQUIRED)
    elif len(title.strip()) > TITLE_MAX_LENGTH:
        violations.append(TITLE_TOO_LONG)

    if _is_blank(content):
        violations.append(CONTENT_REQUIRED)

    return violations
