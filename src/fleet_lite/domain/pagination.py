from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from fleet_lite.domain.truck import PagingValidationError

T = TypeVar("T")

ITEMS_PER_PAGE = 10


def _validate(page_size: int, offset: int) -> None:
    if page_size <= 0:
        raise PagingValidationError("page_size must be > 0")
    if offset < 0:
        raise PagingValidationError("offset must be >= 0")


def paginate(items: Sequence[T], page_size: int = ITEMS_PER_PAGE, offset: int = 0) -> list[T]:
    """
    Return the page starting at offset.

    Slicing past the end yields an empty page, not an error.

    Raises:
        PagingValidationError: If page_size <= 0 or offset < 0
    """
    _validate(page_size, offset)
    return list(items[offset : offset + page_size])


def page_count(total: int, page_size: int = ITEMS_PER_PAGE) -> int:
    _validate(page_size, 0)
    return -(-total // page_size)


def last_page_offset(total: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Offset of the last non-empty page (0 for an empty set)."""
    pages = page_count(total, page_size)
    return max(pages - 1, 0) * page_size
