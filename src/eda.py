"""
Exploratory data analysis of the Airbnb NYC listings.

Usage (from project root)
-------------------------
# Run the full EDA on the configured CSV and save charts:
python -m src.eda

# Or import the pipeline:
from src.eda import run_eda
result = run_eda("data/raw/AB_NYC_2019.csv", output_dir="reports/figures")

The input location, encoding and figure folder are read from `src.config`
(overridable with AIRBNB_NYC_DATA, AIRBNB_NYC_ENCODING, AIRBNB_NYC_FIGURES).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd

from src.analysis.summarize import Summary, summarize
from src.config import DATA_PATH, ENCODING, FIGURES_DIR
from src.data.clean_data import CleaningResult, clean_listings
from src.data.load_data import load_listings
from src.reporting.report import print_cleaning, print_observations, print_overview, print_summary
from src.visualization.plots import render_figures


@dataclass(frozen=True)
class EDAResult:
    raw: pd.DataFrame
    cleaning: CleaningResult
    summary: Summary
    figures: Dict[str, object]


def run_eda(
    path: str = DATA_PATH,
    encoding: str = ENCODING,
    output_dir: Optional[str] = FIGURES_DIR,
    show: bool = False,
) -> EDAResult:
    """
    Load, clean, summarize, plot and report in a single pass.

    Load failures (OSError, pandas.errors.ParserError) propagate and abort
    the run.

    Parameters
    ----------
    path : str
        Listings CSV.
    encoding : str
        Character set of the CSV.
    output_dir : str or None
        Folder for chart PNGs; None keeps the figures in memory.
    show : bool
        Display the charts interactively.

    Returns
    -------
    EDAResult
    """
    print(f"Loading listings from {path} ...")
    raw = load_listings(path, encoding=encoding)
    print_overview(raw)

    cleaning = clean_listings(raw)
    print_cleaning(cleaning)

    summary = summarize(cleaning.df)
    print_summary(summary)

    figures = render_figures(cleaning.df, summary.correlation, output_dir=output_dir, show=show)
    if output_dir is not None:
        for name, fig_path in figures.items():
            print(f"Saved {name} -> {fig_path}")

    print_observations()
    return EDAResult(raw=raw, cleaning=cleaning, summary=summary, figures=figures)


if __name__ == "__main__":
    run_eda()
