"""
Console output for the listings EDA.

Everything here prints; nothing is computed beyond formatting. The key
observations are a fixed narrative, not derived from the loaded data.
"""

import pandas as pd

from src.analysis.summarize import Summary, skim, structure_report
from src.data.clean_data import CleaningResult
from src.data.load_data import preview

KEY_OBSERVATIONS = [
    ("Missing Data", "Check if missing values in 'last_review' or 'reviews_per_month' "
                     "are legitimate (hosts with no reviews)"),
    ("Price Distribution", "Highly skewed; majority of listings under $500, but extreme outliers exist."),
    ("Room Type", "Entire home/apt typically has higher median prices than private/shared rooms."),
    ("Minimum Nights", "Extreme values (some listings > 365). Could be special cases."),
    ("Geographic Plots", "Manhattan and Brooklyn have the densest clusters. Higher prices often in Manhattan."),
]


def print_overview(df: pd.DataFrame):
    """Dimensions, column names, first rows, structure and skim reports of the loaded table."""
    rows, cols = df.shape
    print(f"Dataset dimensions: {rows} {cols}")
    print("Column names:")
    print(list(df.columns))

    print("\n--- Preview of First Rows ---")
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(preview(df))

    print("\n--- Structure ---")
    print(structure_report(df))

    print("\n--- Skim Summary ---")
    for kind, table in skim(df).items():
        if table.empty:
            continue
        print(f"\nColumn type: {kind}")
        print(table)


def print_cleaning(result: CleaningResult):
    if result.dropped_columns:
        print("Dropping empty columns:", " ".join(result.dropped_columns))

    print("\n--- Missing Values per Column ---")
    print(result.missing_counts)

    if "price" in result.df.columns:
        print(f"Removed {result.removed_rows} rows with zero or negative price.")


def print_summary(summary: Summary):
    print("\n--- Basic Descriptive Stats (numeric cols) ---")
    if summary.describe.empty:
        print("No numeric columns.")
        return
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(summary.describe)


def print_observations():
    print("\n--- Key Observations from EDA ---")
    for heading, note in KEY_OBSERVATIONS:
        print(f"* {heading}:")
        print(f"  - {note}")
    print("\n--- EDA Complete ---")
