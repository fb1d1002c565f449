"""Pagination controls component."""

from __future__ import annotations

from typing import Callable, Optional

import streamlit as st

from config import PAGE_SIZE_OPTIONS
from services.page_request import normalize_limit
from services.page_window import PageWindow, change_limit

PageChangeHandler = Callable[[int], None]
LimitChangeHandler = Callable[[int], None]


def _handle_limit_change(
    widget_key: str,
    on_limit_change: LimitChangeHandler,
    on_page_change: PageChangeHandler,
) -> None:
    """Forward a page-size selection and return the view to the first page."""
    new_limit, new_offset = change_limit(int(st.session_state[widget_key]))
    on_limit_change(new_limit)
    on_page_change(new_offset)


def render_pagination(
    total: int,
    limit: int,
    offset: int,
    on_page_change: PageChangeHandler,
    on_limit_change: LimitChangeHandler,
    loading: bool = False,
    key: str = "pagination",
) -> Optional[PageWindow]:
    """Render page-size selector, range captions and First/Previous/Next/Last buttons.

    Renders nothing and returns ``None`` when there are no items.
    """
    if total <= 0:
        return None

    # Page by the size the selector shows.
    selected_limit = normalize_limit(limit)
    window = PageWindow.clamped(total, selected_limit, offset)
    navigation = window.navigation(loading=loading)

    size_col, range_col, page_col, *button_cols = st.columns([2, 3, 2, 1, 1, 1, 1])

    with size_col:
        limit_key = f"{key}_limit"
        st.selectbox(
            "Items per page",
            options=PAGE_SIZE_OPTIONS,
            index=PAGE_SIZE_OPTIONS.index(selected_limit),
            key=limit_key,
            disabled=navigation.limit_disabled,
            on_change=_handle_limit_change,
            args=(limit_key, on_limit_change, on_page_change),
        )

    with range_col:
        st.caption(window.range_label())

    with page_col:
        st.caption(window.page_label())

    buttons = [
        ("First", "first", navigation.first_disabled, window.first_offset()),
        ("Previous", "previous", navigation.previous_disabled, window.previous_offset()),
        ("Next", "next", navigation.next_disabled, window.next_offset()),
        ("Last", "last", navigation.last_disabled, window.last_offset()),
    ]
    for column, (label, action, disabled, target_offset) in zip(button_cols, buttons):
        with column:
            st.button(
                label,
                key=f"{key}_{action}",
                disabled=disabled,
                on_click=on_page_change,
                args=(target_offset,),
            )

    return window
