"""Helper utilities for value normalization and CSV reading."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pandas as pd


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    if isinstance(value, pd.Timestamp):
        return value.date().isoformat()
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value).strip()


def read_csv_with_columns(file_path: Path, columns: list[str]) -> pd.DataFrame:
    """Read a CSV as strings and make sure every expected column is present."""
    dataframe = pd.read_csv(file_path, dtype=str).fillna("")
    for column in columns:
        if column not in dataframe.columns:
            dataframe[column] = ""
    return dataframe[columns]
