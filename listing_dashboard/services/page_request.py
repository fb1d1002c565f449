"""Parsing of limit/offset inputs and list pagination metadata."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Tuple

from config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PAGE_SIZE_OPTIONS
from utils.helpers import normalize_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageMeta:
    """Pagination block returned alongside a page of records."""

    total: int
    limit: int
    offset: int
    has_more: bool

    def to_dict(self) -> dict:
        return asdict(self)


def _parse_int(value: object) -> int | None:
    raw_value = normalize_text(value)
    if not raw_value:
        return None
    try:
        return int(raw_value)
    except ValueError:
        return None


def parse_page_params(limit: object = None, offset: object = None) -> Tuple[int, int]:
    """Parse raw limit/offset values into a usable pair.

    Missing, non-numeric or non-positive limits fall back to the default page
    size and are capped at ``MAX_PAGE_SIZE``. Missing, non-numeric or negative
    offsets become 0.
    """
    parsed_limit = _parse_int(limit)
    if parsed_limit is None or parsed_limit <= 0:
        if limit is not None:
            logger.debug("Falling back to default page size for limit=%r", limit)
        parsed_limit = DEFAULT_PAGE_SIZE
    parsed_limit = min(parsed_limit, MAX_PAGE_SIZE)

    parsed_offset = _parse_int(offset)
    if parsed_offset is None or parsed_offset < 0:
        parsed_offset = 0

    return parsed_limit, parsed_offset


def normalize_limit(value: object) -> int:
    """Return ``value`` as one of the selectable page sizes, or the default."""
    parsed = _parse_int(value)
    if parsed in PAGE_SIZE_OPTIONS:
        return parsed
    return DEFAULT_PAGE_SIZE


def build_page_meta(total: int, limit: int, offset: int) -> PageMeta:
    """Build the pagination block for a list response."""
    return PageMeta(
        total=total,
        limit=limit,
        offset=offset,
        has_more=offset + limit < total,
    )
