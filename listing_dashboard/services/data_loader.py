"""Record loading and page slicing for the listing."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from config import REQUIRED_RECORD_COLUMNS
from services.page_window import PageWindow
from utils.helpers import read_csv_with_columns
from utils.pagination import page_slice

logger = logging.getLogger(__name__)


def load_records(records_file: Path) -> pd.DataFrame:
    """Load and normalize listing records from CSV, sorted by name."""
    if not records_file.exists():
        raise FileNotFoundError(f"Missing required file: {records_file}")

    dataframe = read_csv_with_columns(records_file, REQUIRED_RECORD_COLUMNS)
    dataframe["tier"] = dataframe["tier"].astype(str).str.strip().str.upper()

    # Duplicate ids keep the last occurrence in the file.
    dataframe = dataframe.drop_duplicates(subset="company_id", keep="last")
    dataframe = dataframe.sort_values(
        by="name",
        ascending=True,
        kind="mergesort",
        na_position="last",
    ).reset_index(drop=True)

    logger.info("Loaded %d records from %s", len(dataframe), records_file)
    return dataframe


def slice_page(dataframe: pd.DataFrame, window: PageWindow) -> pd.DataFrame:
    """Return the rows visible in ``window``."""
    start, end = page_slice(window.offset, window.limit, len(dataframe))
    return dataframe.iloc[start:end]
