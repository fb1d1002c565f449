"""Read-only table component for the current page of records."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from config import TABLE_COLUMNS


def render_table(page_df: pd.DataFrame) -> None:
    """Render the visible page of records."""
    if page_df.empty:
        st.info("No rows available.")
        return

    display_columns = [column for column in TABLE_COLUMNS if column in page_df.columns]
    st.dataframe(
        page_df[display_columns],
        hide_index=True,
        width="stretch",
        column_config={
            "company_id": st.column_config.TextColumn("ID", width="small"),
            "name": st.column_config.TextColumn("Company"),
            "tier": st.column_config.TextColumn("Tier", width="small"),
            "email": st.column_config.TextColumn("Email"),
            "phone": st.column_config.TextColumn("Phone"),
            "created_at": st.column_config.TextColumn("Created"),
        },
    )
