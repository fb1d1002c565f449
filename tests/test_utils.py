"""Tests for utility functions."""

import pandas as pd

from utils.helpers import normalize_text, read_csv_with_columns
from utils.pagination import (
    clamp_offset,
    compute_current_page,
    compute_total_pages,
    last_page_offset,
    page_slice,
)


class TestPaginationArithmetic:
    """Tests for pagination helpers."""

    def test_rounds_up_total_pages(self):
        """Should round up when not evenly divisible."""
        assert compute_total_pages(95, 25) == 4
        assert compute_total_pages(100, 25) == 4

    def test_zero_total_has_no_pages(self):
        """Should return 0 pages for an empty collection."""
        assert compute_total_pages(0, 25) == 0

    def test_current_page_for_unaligned_offset(self):
        """Should use the page containing the offset."""
        assert compute_current_page(70, 25) == 3

    def test_last_page_offset(self):
        """Should align to the page boundary."""
        assert last_page_offset(95, 25) == 75
        assert last_page_offset(1, 25) == 0

    def test_clamp_offset(self):
        """Should keep offsets within [0, last page start]."""
        assert clamp_offset(-5, 95, 25) == 0
        assert clamp_offset(500, 95, 25) == 75
        assert clamp_offset(30, 95, 25) == 30

    def test_page_slice(self):
        """Should stop at the collection end."""
        assert page_slice(75, 25, 95) == (75, 95)
        assert page_slice(0, 25, 0) == (0, 0)


class TestHelpers:
    """Tests for normalization helpers."""

    def test_normalize_text_handles_nulls(self):
        """Should convert nulls to empty strings."""
        assert normalize_text(None) == ""
        assert normalize_text(float("nan")) == ""
        assert normalize_text("  25 ") == "25"

    def test_read_csv_with_columns_adds_missing(self, tmp_path):
        """Should fill absent columns with empty strings."""
        csv_path = tmp_path / "records.csv"
        pd.DataFrame({"a": ["1"]}).to_csv(csv_path, index=False)

        dataframe = read_csv_with_columns(csv_path, ["a", "b"])

        assert list(dataframe.columns) == ["a", "b"]
        assert dataframe.loc[0, "b"] == ""
