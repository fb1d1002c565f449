"""Page window arithmetic and navigation targets for offset-paged listings.

A ``PageWindow`` is recomputed from the caller-owned ``(total, limit, offset)``
triple on every render. It never mutates: every navigation helper returns a
new offset (or a new ``(limit, offset)`` pair) for the caller to store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from utils.pagination import (
    clamp_offset,
    compute_current_page,
    compute_total_pages,
    last_page_offset,
)

logger = logging.getLogger(__name__)


class InvalidPageWindowError(ValueError):
    """Raised when a page window is built from out-of-range inputs."""

    def __init__(self, field: str, value: object, constraint: str) -> None:
        super().__init__(f"invalid {field}: {value!r} (must be {constraint})")
        self.field = field
        self.value = value


class ViewState(str, Enum):
    """Whether the owning view is idle or waiting on a data fetch."""

    IDLE = "idle"
    LOADING = "loading"


@dataclass(frozen=True)
class NavigationState:
    """Disabled flags for the four navigation actions."""

    first_disabled: bool
    previous_disabled: bool
    next_disabled: bool
    last_disabled: bool
    view_state: ViewState = ViewState.IDLE

    @property
    def limit_disabled(self) -> bool:
        return self.view_state is ViewState.LOADING

    @property
    def all_disabled(self) -> bool:
        return (
            self.first_disabled
            and self.previous_disabled
            and self.next_disabled
            and self.last_disabled
        )


def _require_limit(limit: int) -> None:
    if limit <= 0:
        raise InvalidPageWindowError("limit", limit, "> 0")


@dataclass(frozen=True)
class PageWindow:
    """Visible slice of a paged collection."""

    total: int
    limit: int
    offset: int

    @classmethod
    def create(cls, total: int, limit: int, offset: int = 0) -> PageWindow:
        """Build a window, rejecting negative totals/offsets and non-positive limits."""
        _require_limit(limit)
        if total < 0:
            raise InvalidPageWindowError("total", total, ">= 0")
        if offset < 0:
            raise InvalidPageWindowError("offset", offset, ">= 0")
        return cls(total=total, limit=limit, offset=offset)

    @classmethod
    def clamped(cls, total: int, limit: int, offset: int = 0) -> PageWindow:
        """Build a window from possibly stale inputs by coercing them into range.

        ``limit`` must still be positive; there is no sensible page size to
        fall back to at this layer.
        """
        _require_limit(limit)
        safe_total = max(total, 0)
        safe_offset = clamp_offset(offset, safe_total, limit)
        if (safe_total, safe_offset) != (total, offset):
            logger.debug(
                "Clamped page window total=%s offset=%s to total=%s offset=%s",
                total,
                offset,
                safe_total,
                safe_offset,
            )
        return cls(total=safe_total, limit=limit, offset=safe_offset)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def current_page(self) -> int:
        return compute_current_page(self.offset, self.limit)

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self.total, self.limit)

    @property
    def start_item(self) -> int:
        return self.offset + 1

    @property
    def end_item(self) -> int:
        return min(self.offset + self.limit, self.total)

    @property
    def is_first_page(self) -> bool:
        return self.current_page == 1

    @property
    def is_last_page(self) -> bool:
        return self.current_page == self.total_pages

    def navigation(self, loading: bool = False) -> NavigationState:
        """Return disabled flags for First/Previous/Next/Last.

        A pending fetch disables every action regardless of page position so
        navigation requests cannot overlap.
        """
        view_state = ViewState.LOADING if loading else ViewState.IDLE
        if view_state is ViewState.LOADING:
            return NavigationState(True, True, True, True, view_state)
        return NavigationState(
            first_disabled=self.is_first_page,
            previous_disabled=self.is_first_page,
            next_disabled=self.is_last_page,
            last_disabled=self.is_last_page,
            view_state=view_state,
        )

    def first_offset(self) -> int:
        return go_to_first()

    def previous_offset(self) -> int:
        return go_to_previous(self.offset, self.limit)

    def next_offset(self) -> int:
        return go_to_next(self.offset, self.limit, self.total)

    def last_offset(self) -> int:
        return go_to_last(self.total, self.limit)

    def range_label(self) -> str:
        """Return the ``"X-Y of Z items"`` caption."""
        return f"{self.start_item}-{self.end_item} of {self.total} items"

    def page_label(self) -> str:
        return f"Page {self.current_page} of {self.total_pages}"


def compute_window(total: int, limit: int, offset: int) -> Optional[PageWindow]:
    """Return the window for the triple, or ``None`` when there is nothing to paginate."""
    window = PageWindow.create(total, limit, offset)
    if window.is_empty:
        return None
    return window


def go_to_first() -> int:
    return 0


def go_to_previous(offset: int, limit: int) -> int:
    _require_limit(limit)
    return max(0, offset - limit)


def go_to_next(offset: int, limit: int, total: int) -> int:
    """Return the offset for the Next action.

    The target is capped at ``total - limit`` and floored at zero, so a single
    partial page (``total < limit``) stays at offset 0.
    """
    _require_limit(limit)
    target = min(total - limit, offset + limit)
    if target < 0:
        logger.debug(
            "Next offset %s below zero for total=%s limit=%s; using 0",
            target,
            total,
            limit,
        )
        return 0
    return target


def go_to_last(total: int, limit: int) -> int:
    _require_limit(limit)
    return last_page_offset(total, limit)


def change_limit(new_limit: int) -> Tuple[int, int]:
    """Return the ``(limit, offset)`` pair after a page-size change.

    The offset always resets to the first page.
    """
    _require_limit(new_limit)
    return new_limit, go_to_first()
