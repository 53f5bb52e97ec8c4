"""
Descriptive statistics for the cleaned listings table.

Nothing here modifies the frame it is given.

Usage
-----
from src.analysis.summarize import summarize
summary = summarize(df)
summary.describe          # min / quartiles / mean / max per numeric column
summary.correlation       # Pearson matrix, or None with < 2 numeric columns
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

SAMPLE_VALUES = 3


@dataclass(frozen=True)
class Summary:
    numeric_columns: List[str]
    describe: pd.DataFrame
    structure: pd.DataFrame
    skim: Dict[str, pd.DataFrame]
    correlation: Optional[pd.DataFrame]


def numeric_columns(df: pd.DataFrame) -> List[str]:
    return df.select_dtypes(include=[np.number]).columns.tolist()


def describe_numeric(df: pd.DataFrame) -> pd.DataFrame:
    """
    Five-number summary plus mean for every numeric column.

    Rows are ``min, q1, median, mean, q3, max, n_missing``; one column per
    numeric column of `df`.
    """
    cols = numeric_columns(df)
    stats = {}
    for c in cols:
        s = df[c]
        stats[c] = {
            "min": s.min(),
            "q1": s.quantile(0.25),
            "median": s.median(),
            "mean": s.mean(),
            "q3": s.quantile(0.75),
            "max": s.max(),
            "n_missing": int(s.isna().sum()),
        }
    index = ["min", "q1", "median", "mean", "q3", "max", "n_missing"]
    return pd.DataFrame(stats, index=index, columns=cols)


def structure_report(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-column structure: dtype, non-null count, distinct values and a few
    sample values.
    """
    rows = []
    for c in df.columns:
        s = df[c]
        samples = s.dropna().head(SAMPLE_VALUES).tolist()
        rows.append({
            "column": c,
            "dtype": str(s.dtype),
            "non_null": int(s.notna().sum()),
            "n_unique": int(s.nunique(dropna=True)),
            "sample": ", ".join(str(v) for v in samples),
        })
    return pd.DataFrame(rows, columns=["column", "dtype", "non_null", "n_unique", "sample"]).set_index("column")


def skim(df: pd.DataFrame) -> Dict[str, pd.DataFrame]:
    """
    Compact per-type overview of every column.

    Returns
    -------
    dict
        ``"character"``: n_missing, complete_rate, min/max string length and
        n_unique for non-numeric columns.
        ``"numeric"``: n_missing, complete_rate, mean, sd and the
        0/25/50/75/100 percentiles for numeric columns.
    """
    n = len(df)
    num_cols = numeric_columns(df)
    char_rows = {}
    num_rows = {}

    for c in df.columns:
        s = df[c]
        n_missing = int(s.isna().sum())
        complete_rate = (n - n_missing) / n if n else np.nan

        if c in num_cols:
            num_rows[c] = {
                "n_missing": n_missing,
                "complete_rate": complete_rate,
                "mean": s.mean(),
                "sd": s.std(),
                "p0": s.quantile(0.0),
                "p25": s.quantile(0.25),
                "p50": s.quantile(0.5),
                "p75": s.quantile(0.75),
                "p100": s.quantile(1.0),
            }
        else:
            lengths = s.dropna().astype(str).str.len()
            char_rows[c] = {
                "n_missing": n_missing,
                "complete_rate": complete_rate,
                "min": int(lengths.min()) if not lengths.empty else np.nan,
                "max": int(lengths.max()) if not lengths.empty else np.nan,
                "n_unique": int(s.nunique(dropna=True)),
            }

    char_cols = ["n_missing", "complete_rate", "min", "max", "n_unique"]
    num_stat_cols = ["n_missing", "complete_rate", "mean", "sd", "p0", "p25", "p50", "p75", "p100"]
    return {
        "character": pd.DataFrame.from_dict(char_rows, orient="index", columns=char_cols),
        "numeric": pd.DataFrame.from_dict(num_rows, orient="index", columns=num_stat_cols),
    }


def correlation_matrix(df: pd.DataFrame) -> Optional[pd.DataFrame]:
    """
    Pearson correlation between numeric columns.

    Rows with a missing value in any numeric column are excluded first
    (listwise deletion). Returns None when fewer than two numeric columns
    exist.
    """
    cols = numeric_columns(df)
    if len(cols) <= 1:
        return None
    complete = df[cols].dropna()
    return complete.corr(method="pearson")


def summarize(df: pd.DataFrame) -> Summary:
    return Summary(
        numeric_columns=numeric_columns(df),
        describe=describe_numeric(df),
        structure=structure_report(df),
        skim=skim(df),
        correlation=correlation_matrix(df),
    )
