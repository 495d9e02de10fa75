"""Page-window arithmetic for listings."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from playcli.config import DEFAULT_PAGE_SIZE
from playcli.models import Page

T = TypeVar("T")


def paginate(items: Sequence[T], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """Slice ``items`` into the requested 1-indexed page.

    The page number is clamped into the valid range, and an empty sequence
    still reports a single (empty) page.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total_items = len(items)
    total_pages = max(1, math.ceil(total_items / page_size))
    current_page = min(max(page, 1), total_pages)
    start = (current_page - 1) * page_size

    return Page(
        items=tuple(items[start : start + page_size]),
        total_pages=total_pages,
        current_page=current_page,
        total_items=total_items,
        page_size=page_size,
    )
