"""
Pagination Utilities.

Page-number pagination for list endpoints. Query values arrive as raw
strings; PageParams.from_raw parses them explicitly and falls back to
defaults for anything absent, non-numeric or not positive.
"""

import math
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_positive_int(value: Any, default: int) -> int:
    """
    Parse a positive integer from an int or a decimal string.

    Returns `default` for None, booleans, non-numeric strings and
    values below 1.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return default
    else:
        return default
    return parsed if parsed >= 1 else default


@dataclass(frozen=True)
class PageParams:
    """Validated page number and page size."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        """Index of the first item on this page."""
        return (self.page - 1) * self.limit

    @classmethod
    def from_raw(
        cls,
        page: Any = None,
        limit: Any = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int | None = None,
    ) -> "PageParams":
        """
        Build params from untrusted input.

        Args:
            page: Requested page number (int, string or None)
            limit: Requested page size (int, string or None)
            default_limit: Page size used when `limit` is unusable
            max_limit: Optional cap; larger limits are clamped to it

        Returns:
            PageParams with page >= 1 and limit >= 1
        """
        parsed_limit = parse_positive_int(limit, default_limit)
        if max_limit is not None:
            parsed_limit = min(parsed_limit, max_limit)
        return cls(
            page=parse_positive_int(page, DEFAULT_PAGE),
            limit=parsed_limit,
        )


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for `total` items; 0 when there are none."""
    return math.ceil(total / limit) if total else 0


@dataclass
class PagedResult(Generic[T]):
    """Items on one page plus the totals needed for pagination metadata."""

    items: list[T]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.limit)


def paginate(items: list[T], params: PageParams) -> PagedResult[T]:
    """
    Slice one page out of an already filtered sequence.

    Out-of-range pages yield an empty item list, never an error.
    """
    start = params.offset
    return PagedResult(
        items=items[start:start + params.limit],
        page=params.page,
        limit=params.limit,
        total=len(items),
    )
