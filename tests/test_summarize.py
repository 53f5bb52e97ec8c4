"""
Tests for src/analysis/summarize.py
"""
from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from src.analysis.summarize import (
    Summary,
    correlation_matrix,
    describe_numeric,
    numeric_columns,
    skim,
    structure_report,
    summarize,
)
from src.data.clean_data import clean_listings


@pytest.fixture
def cleaned(listings_df) -> pd.DataFrame:
    return clean_listings(listings_df).df


class TestNumericColumns:

    def test_excludes_text(self, cleaned):
        cols = numeric_columns(cleaned)
        assert "price" in cols
        assert "latitude" in cols
        assert "room_type" not in cols
        assert "last_review" not in cols


class TestDescribeNumeric:

    def test_quartiles_and_mean(self):
        df = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0], "label": list("abcd")})
        stats = describe_numeric(df)

        assert list(stats.columns) == ["x"]
        assert stats.loc["min", "x"] == 1.0
        assert stats.loc["q1", "x"] == pytest.approx(1.75)
        assert stats.loc["median", "x"] == pytest.approx(2.5)
        assert stats.loc["mean", "x"] == pytest.approx(2.5)
        assert stats.loc["q3", "x"] == pytest.approx(3.25)
        assert stats.loc["max", "x"] == 4.0
        assert stats.loc["n_missing", "x"] == 0

    def test_counts_missing(self):
        df = pd.DataFrame({"x": [1.0, np.nan, 3.0]})
        assert describe_numeric(df).loc["n_missing", "x"] == 1

    def test_no_numeric_columns(self):
        df = pd.DataFrame({"label": ["a", "b"]})
        assert describe_numeric(df).empty


class TestStructureReport:

    def test_one_row_per_column(self, cleaned):
        report = structure_report(cleaned)
        assert list(report.index) == list(cleaned.columns)
        assert report.loc["room_type", "n_unique"] == 3
        assert report.loc["price", "non_null"] == len(cleaned)
        assert report.loc["name", "sample"].startswith("Listing")


class TestSkim:

    def test_splits_by_type(self, cleaned):
        out = skim(cleaned)
        assert set(out) == {"character", "numeric"}
        assert "room_type" in out["character"].index
        assert "price" in out["numeric"].index
        assert "price" not in out["character"].index

    def test_complete_rate(self):
        df = pd.DataFrame({"x": [1.0, np.nan, 3.0, 4.0], "s": ["a", "bb", None, "dddd"]})
        out = skim(df)
        assert out["numeric"].loc["x", "complete_rate"] == pytest.approx(0.75)
        assert out["character"].loc["s", "min"] == 1
        assert out["character"].loc["s", "max"] == 4


class TestCorrelationMatrix:

    def test_perfectly_correlated(self):
        x = np.arange(1, 21, dtype=float)
        df = pd.DataFrame({"x": x, "y": 2 * x})
        corr = correlation_matrix(df)
        assert corr.loc["x", "y"] == pytest.approx(1.0)

    def test_symmetric_unit_diagonal_bounded(self, cleaned):
        corr = correlation_matrix(cleaned)
        values = corr.to_numpy()
        finite = values[np.isfinite(values)]

        np.testing.assert_allclose(values, values.T, equal_nan=True)
        np.testing.assert_allclose(np.diag(values), 1.0)
        assert ((finite >= -1 - 1e-12) & (finite <= 1 + 1e-12)).all()

    def test_listwise_deletion(self):
        df = pd.DataFrame({
            "x": [1.0, 2.0, 3.0, 4.0, 5.0],
            "y": [2.0, 1.0, 4.0, 3.0, np.nan],
            "z": [5.0, 3.0, 4.0, 1.0, 100.0],
        })
        expected = df.iloc[:4].corr()
        pd.testing.assert_frame_equal(correlation_matrix(df), expected)

    def test_single_numeric_column(self):
        df = pd.DataFrame({"price": [1.0, 2.0], "room_type": ["a", "b"]})
        assert correlation_matrix(df) is None


class TestSummarize:

    def test_bundles_results(self, cleaned):
        summary = summarize(cleaned)
        assert isinstance(summary, Summary)
        assert summary.numeric_columns == numeric_columns(cleaned)
        assert list(summary.describe.columns) == summary.numeric_columns
        assert summary.correlation is not None

    def test_skim_describes_cleaned_table(self, listings_df):
        summary = summarize(clean_listings(listings_df).df)
        assert "unused" not in summary.skim["numeric"].index
        assert summary.skim["numeric"].loc["price", "n_missing"] == 0
        assert summary.skim["numeric"].loc["price", "p0"] > 0
