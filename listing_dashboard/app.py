"""Streamlit app entrypoint for the Company Listing."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

from components.filters import render_filters
from components.pagination import render_pagination
from components.table import render_table
from config import FILTER_COLUMNS, LOG_FORMAT, LOG_LEVEL, RECORDS_FILE
from services import data_loader, filter_service, page_request
from services.page_window import PageWindow

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stdout)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Company Listing", layout="wide")


def init_session_state() -> None:
    """Initialize paging state, seeding it from the URL query on first load."""
    limit, offset = page_request.parse_page_params(
        st.query_params.get("limit"),
        st.query_params.get("offset"),
    )
    st.session_state.setdefault("limit", page_request.normalize_limit(limit))
    st.session_state.setdefault("offset", offset)
    st.session_state.setdefault("loading", False)
    st.session_state.setdefault("last_filter_signature", None)
    st.session_state.setdefault("last_window", None)


def set_offset(new_offset: int) -> None:
    st.session_state["offset"] = new_offset


def set_limit(new_limit: int) -> None:
    st.session_state["limit"] = new_limit


@st.cache_data(show_spinner=False)
def get_records(records_path: str, file_mtime: float):
    """Load records with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_records(Path(records_path))


def render_page_controls(slot, window: PageWindow, key: str = "pagination") -> None:
    """Render the pagination control into ``slot``, replacing what it held."""
    with slot.container():
        render_pagination(
            window.total,
            window.limit,
            window.offset,
            on_page_change=set_offset,
            on_limit_change=set_limit,
            loading=st.session_state["loading"],
            key=key,
        )


def load_records_with_flag(pagination_slot):
    """Load records while the previous page's controls are shown locked."""
    st.session_state["loading"] = True
    try:
        last_window = st.session_state["last_window"]
        if last_window is not None:
            pending = PageWindow.clamped(
                last_window.total,
                st.session_state["limit"],
                st.session_state["offset"],
            )
            # Separate keys; the idle control replaces these widgets in the same run.
            render_page_controls(pagination_slot, pending, key="pagination_pending")
        with st.spinner("Loading records..."):
            return get_records(str(RECORDS_FILE), RECORDS_FILE.stat().st_mtime)
    finally:
        st.session_state["loading"] = False


def main() -> None:
    """Render and run the Company Listing."""
    init_session_state()

    st.title("Company Listing")
    filters_area = st.container()
    table_area = st.container()
    pagination_slot = st.empty()

    try:
        if not RECORDS_FILE.exists():
            raise FileNotFoundError(f"CSV not found: {RECORDS_FILE}")
        records_df = load_records_with_flag(pagination_slot)
    except FileNotFoundError as exc:
        pagination_slot.empty()
        st.error(str(exc))
        st.stop()
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("Failed to load records")
        pagination_slot.empty()
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    with filters_area:
        filter_options = filter_service.get_filter_options(records_df, FILTER_COLUMNS)
        selected_filters, search = render_filters(filter_options, FILTER_COLUMNS)
    signature = filter_service.filters_signature(selected_filters, search)

    previous_signature = st.session_state["last_filter_signature"]
    if previous_signature is not None and signature != previous_signature:
        # A new result set starts on its first page.
        set_offset(0)
    st.session_state["last_filter_signature"] = signature

    filtered_df = filter_service.apply_filters(records_df, selected_filters, search)
    total = len(filtered_df)

    with table_area:
        st.caption(f"Total Rows: {total}/{len(records_df)}")
        if total == 0:
            st.session_state["last_window"] = None
            pagination_slot.empty()
            render_table(filtered_df)
            return

        window = PageWindow.clamped(total, st.session_state["limit"], st.session_state["offset"])
        st.session_state["offset"] = window.offset
        st.session_state["last_window"] = window
        render_table(data_loader.slice_page(filtered_df, window))

    render_page_controls(pagination_slot, window)

    meta = page_request.build_page_meta(window.total, window.limit, window.offset)
    st.query_params.update({"limit": str(meta.limit), "offset": str(meta.offset)})
    logger.debug("Rendered page %s", meta.to_dict())


if __name__ == "__main__":
    main()
