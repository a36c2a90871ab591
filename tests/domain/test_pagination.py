from __future__ import annotations

import pytest

from fleet_lite.domain.pagination import ITEMS_PER_PAGE, last_page_offset, page_count, paginate
from fleet_lite.domain.truck import PagingValidationError


@pytest.fixture()
def items() -> list[int]:
    return list(range(25))


def test_first_page(items: list[int]) -> None:
    assert paginate(items, 10, 0) == list(range(10))


def test_middle_page(items: list[int]) -> None:
    assert paginate(items, 10, 10) == list(range(10, 20))


def test_last_page_is_clipped(items: list[int]) -> None:
    assert paginate(items, 10, 20) == [20, 21, 22, 23, 24]


@pytest.mark.parametrize("offset", [25, 30, 1000])
def test_offset_past_end_returns_empty_page(items: list[int], offset: int) -> None:
    assert paginate(items, 10, offset) == []


def test_empty_sequence_returns_empty_page() -> None:
    assert paginate([], 10, 0) == []


def test_default_page_size_is_items_per_page(items: list[int]) -> None:
    assert ITEMS_PER_PAGE == 10
    assert len(paginate(items)) == ITEMS_PER_PAGE


@pytest.mark.parametrize("page_size", [1, 3, 7, 10, 40])
@pytest.mark.parametrize("offset", [0, 5, 24, 25, 26])
def test_page_length_bounds(items: list[int], page_size: int, offset: int) -> None:
    page = paginate(items, page_size, offset)

    assert len(page) <= page_size
    if offset >= len(items):
        assert page == []


def test_paginate_returns_new_list(items: list[int]) -> None:
    page = paginate(items, 50, 0)
    page.append(99)

    assert len(items) == 25


@pytest.mark.parametrize(("page_size", "offset"), [(0, 0), (-1, 0), (10, -1)])
def test_malformed_arguments_raise(items: list[int], page_size: int, offset: int) -> None:
    with pytest.raises(PagingValidationError):
        paginate(items, page_size, offset)


@pytest.mark.parametrize(
    ("total", "expected_pages", "expected_last_offset"),
    [(0, 0, 0), (1, 1, 0), (10, 1, 0), (11, 2, 10), (25, 3, 20)],
)
def test_page_count_and_last_offset(
    total: int, expected_pages: int, expected_last_offset: int
) -> None:
    assert page_count(total, 10) == expected_pages
    assert last_page_offset(total, 10) == expected_last_offset
