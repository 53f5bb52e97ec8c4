"""
Cleaning steps for the listings table.

Applied in order by `clean_listings()`:

1. drop columns where every value is missing
2. count missing values per remaining column
3. drop rows whose price is not positive (when a `price` column exists)

Each step returns a new DataFrame; the input is left untouched.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class CleaningResult:
    df: pd.DataFrame
    dropped_columns: List[str] = field(default_factory=list)
    missing_counts: Optional[pd.Series] = None
    removed_rows: int = 0


def drop_empty_columns(df: pd.DataFrame) -> Tuple[pd.DataFrame, List[str]]:
    """
    Drop every column whose values are all missing.

    Returns the narrowed frame and the names of the dropped columns, in
    their original order.
    """
    empty = [c for c in df.columns if df[c].isna().all()]
    return df.drop(columns=empty), empty


def count_missing(df: pd.DataFrame) -> pd.Series:
    return df.isna().sum()


def filter_positive_prices(df: pd.DataFrame) -> Tuple[pd.DataFrame, int]:
    """
    Keep listings with price > 0.

    Text prices such as "$1,200.00" are stripped to their digits first.
    Missing prices fail the comparison and are removed as well. Without a
    `price` column the frame is returned unchanged.
    """
    if "price" not in df.columns:
        return df.copy(), 0

    df = df.copy()
    if not pd.api.types.is_numeric_dtype(df["price"]):
        cleaned = df["price"].astype(str).str.replace(r"[^\d.\-]", "", regex=True)
        df["price"] = pd.to_numeric(cleaned, errors="coerce")

    original_count = len(df)
    df = df.loc[df["price"] > 0].copy()
    return df, original_count - len(df)


def clean_listings(df: pd.DataFrame) -> CleaningResult:
    df, dropped = drop_empty_columns(df)
    missing = count_missing(df)
    df, removed = filter_positive_prices(df)
    return CleaningResult(
        df=df,
        dropped_columns=dropped,
        missing_counts=missing,
        removed_rows=removed,
    )
