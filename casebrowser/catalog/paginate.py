"""Fixed-size pagination over a composed view."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


class InvalidPageError(ValueError):
    """Raised when a page index falls outside [1, total_pages]."""


@dataclass(frozen=True)
class Page(Generic[T]):
    items: tuple[T, ...]
    page_index: int
    total_pages: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.page_index > 1

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages


def total_pages(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(max(count, 0) / page_size)


def is_valid_page(page_index: int, total: int) -> bool:
    """Page 1 is always valid; it is the empty page of an empty view."""
    return page_index == 1 or 1 <= page_index <= total


def paginate(view: Sequence[T], page_index: int, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """Slice ``view`` into the 1-based page ``page_index``.

    Raises:
        InvalidPageError: if the page is out of range. An empty view only
            has page 1, which holds no items.
        ValueError: if ``page_size`` is not positive.
    """
    total = total_pages(len(view), page_size)
    if not is_valid_page(page_index, total):
        raise InvalidPageError(f"page {page_index} out of range 1..{max(total, 1)}")
    start = (page_index - 1) * page_size
    return Page(
        items=tuple(view[start:start + page_size]),
        page_index=page_index,
        total_pages=total,
        page_size=page_size,
    )


def next_page(page_index: int, total: int) -> int:
    return min(page_index + 1, max(total, 1))


def previous_page(page_index: int) -> int:
    return max(page_index - 1, 1)


def parse_page_request(raw: object, total: int) -> int | None:
    """Validate direct page-number input; ``None`` means ignore the request."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    if 1 <= value <= total:
        return value
    return None
