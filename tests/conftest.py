"""
Shared pytest fixtures for the test suite.

This module provides:
- A small NYC-style listings DataFrame
- The same table written to a temporary CSV
- A non-interactive matplotlib backend and figure cleanup
"""
from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest


# ============================================================
# DATA FIXTURES
# ============================================================

@pytest.fixture
def listings_df() -> pd.DataFrame:
    """Twelve listings with one fully-empty column and a few bad prices."""
    return pd.DataFrame({
        "id": range(1, 13),
        "name": [f"Listing {i}" for i in range(1, 13)],
        "neighbourhood_group": ["Manhattan", "Brooklyn", "Queens", "Bronx"] * 3,
        "latitude": np.linspace(40.60, 40.85, 12),
        "longitude": np.linspace(-74.05, -73.80, 12),
        "room_type": ["Entire home/apt", "Private room", "Shared room"] * 4,
        "price": [150, 80, 40, 0, 225, 95, -10, 300, 60, 1200, 75, np.nan],
        "minimum_nights": [1, 2, 3, 30, 1, 5, 2, 400, 1, 7, 3, 2],
        "last_review": ["2019-06-01", None, "2019-05-20", None, "2019-07-01", "2019-01-11",
                        None, "2018-12-30", "2019-06-15", None, "2019-03-03", "2019-04-04"],
        "reviews_per_month": [1.2, np.nan, 0.4, np.nan, 3.1, 0.2, np.nan, 0.1, 2.2, np.nan, 0.9, 1.5],
        "unused": [np.nan] * 12,
    })


@pytest.fixture
def listings_csv(tmp_path, listings_df) -> str:
    """Write `listings_df` to a CSV, missing values as empty fields."""
    path = tmp_path / "AB_NYC_2019.csv"
    listings_df.to_csv(path, index=False)
    return str(path)


# ============================================================
# PLOTTING
# ============================================================

@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
