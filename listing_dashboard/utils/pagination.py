"""Pagination helpers for offset-based table slicing."""

from __future__ import annotations

import math
from typing import Tuple


def compute_total_pages(total: int, limit: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def compute_current_page(offset: int, limit: int) -> int:
    """Return the 1-based page that contains the row at ``offset``."""
    return offset // limit + 1


def last_page_offset(total: int, limit: int) -> int:
    """Return the offset of the first row on the last page."""
    return max(0, ((total - 1) // limit) * limit)


def clamp_offset(offset: int, total: int, limit: int) -> int:
    """Clamp an offset to the range of valid page starts."""
    return min(max(offset, 0), last_page_offset(total, limit))


def page_slice(offset: int, limit: int, total: int) -> Tuple[int, int]:
    """Return start/end row offsets for the page starting at ``offset``."""
    start = max(offset, 0)
    end = min(start + limit, total)
    return start, max(start, end)
