"""Filter panel component."""

from __future__ import annotations

from typing import Dict, List, Tuple

import streamlit as st

FILTER_LABELS = {
    "tier": "Tier",
}


def render_filters(options: Dict[str, List[str]], columns: List[str]) -> Tuple[Dict[str, List[str]], str]:
    """Render search box and multi-select filters, returning the active selections."""
    search_col, *filter_cols = st.columns(len(columns) + 1)

    with search_col:
        search = st.text_input(
            "Search",
            key="filter_search",
            placeholder="Company name or email",
        )

    selected_filters: Dict[str, List[str]] = {}
    for slot, column in zip(filter_cols, columns):
        label = FILTER_LABELS.get(column, column)
        with slot:
            selected_filters[column] = st.multiselect(
                label,
                options=options.get(column, []),
                key=f"filter_{column}",
                placeholder=f"Filter {label}",
            )

    return selected_filters, search
