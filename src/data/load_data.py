"""
Load the raw Airbnb NYC listings CSV.

This module provides `load_listings()` which reads the listings file into a
DataFrame. Only empty strings and the literal token "NA" are treated as
missing values; pandas' wider default token list is disabled so that values
such as "None" or "null" in free-text columns survive as text.

An unreadable path raises `OSError`. A file that is not valid delimited
text raises `pandas.errors.ParserError`.
"""

import pandas as pd

from src.config import DATA_PATH, ENCODING, NA_VALUES, PREVIEW_ROWS


def load_listings(path: str = DATA_PATH, encoding: str = ENCODING) -> pd.DataFrame:
    """
    Read the listings CSV.

    Parameters
    ----------
    path : str
        Location of the delimited text file.
    encoding : str
        Character set used to decode the file.

    Returns
    -------
    pd.DataFrame
        One row per listing, missing values as NaN.
    """
    try:
        df = pd.read_csv(
            path,
            encoding=encoding,
            na_values=NA_VALUES,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError as exc:
        raise pd.errors.ParserError(f"{path} contains no delimited data") from exc
    except UnicodeDecodeError as exc:
        raise pd.errors.ParserError(f"{path} could not be decoded as {encoding}: {exc}") from exc
    return df


def preview(df: pd.DataFrame, n: int = PREVIEW_ROWS) -> pd.DataFrame:
    """Return the first `n` rows."""
    return df.head(n)
