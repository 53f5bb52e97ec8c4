"""
Charts for the listings EDA.

Every chart is gated on the columns it needs: when one is missing (or the
table has no rows) the plot function returns None instead of a figure.

Usage
-----
from src.visualization.plots import render_figures
paths = render_figures(df, corr, output_dir="reports/figures")
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.figure import Figure

from src.config import (
    HEATMAP_CMAP,
    HIST_BINS,
    MIN_NIGHTS_CLAMP,
    OUTLIER_ALPHA,
    POINT_ALPHA,
    PRICE_CLAMP,
    TICK_ROTATION,
)


def apply_style():
    """Minimal white-grid theme for every chart."""
    sns.set_theme(style="whitegrid")


def _has_columns(df: pd.DataFrame, columns: Iterable[str]) -> bool:
    return not df.empty and all(c in df.columns for c in columns)


def plot_price_distribution(df: pd.DataFrame) -> Optional[Figure]:
    """Histogram of price on a log10 x axis."""
    if not _has_columns(df, ["price"]):
        return None
    prices = df["price"].dropna()
    if prices.empty:
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    sns.histplot(x=prices, bins=HIST_BINS, log_scale=True, color="blue", edgecolor="white", ax=ax)
    ax.set_title("Distribution of Price (Log Scale)")
    ax.set_xlabel("Price (log scale)")
    ax.set_ylabel("Count")
    return fig


def plot_price_by_room_type(df: pd.DataFrame) -> Optional[Figure]:
    """Box plot of price per room type, focused on prices up to 1000."""
    if not _has_columns(df, ["price", "room_type"]):
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    sns.boxplot(
        data=df,
        x="room_type",
        y="price",
        color="orange",
        flierprops={"alpha": OUTLIER_ALPHA},
        ax=ax,
    )
    ax.set_ylim(*PRICE_CLAMP)
    ax.set_title("Price Distribution by Room Type")
    ax.set_xlabel("Room Type")
    ax.set_ylabel("Price")
    return fig


def plot_price_vs_minimum_nights(df: pd.DataFrame) -> Optional[Figure]:
    if not _has_columns(df, ["price", "minimum_nights"]):
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.scatter(df["minimum_nights"], df["price"], alpha=POINT_ALPHA, color="purple", s=12)
    ax.set_xlim(*MIN_NIGHTS_CLAMP)
    ax.set_ylim(*PRICE_CLAMP)
    ax.set_title("Price vs. Minimum Nights (Clamped Scales)")
    ax.set_xlabel("Minimum Nights")
    ax.set_ylabel("Price")
    return fig


def plot_geographic_distribution(df: pd.DataFrame) -> Optional[Figure]:
    if not _has_columns(df, ["longitude", "latitude", "neighbourhood_group"]):
        return None

    fig, ax = plt.subplots(figsize=(8, 7))
    sns.scatterplot(
        data=df,
        x="longitude",
        y="latitude",
        hue="neighbourhood_group",
        alpha=POINT_ALPHA,
        s=10,
        linewidth=0,
        ax=ax,
    )
    legend = ax.get_legend()
    if legend is not None:
        legend.set_title("Neighborhood Group")
    ax.set_title("Geographical Distribution of Listings")
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    return fig


def plot_correlation_heatmap(corr: Optional[pd.DataFrame]) -> Optional[Figure]:
    """
    Heatmap of a correlation matrix.

    Diverging blue-white-red scale fixed to [-1, 1] and centered at zero.
    """
    if corr is None or corr.empty:
        return None

    fig, ax = plt.subplots(figsize=(9, 7))
    sns.heatmap(
        corr,
        cmap=HEATMAP_CMAP,
        center=0,
        vmin=-1,
        vmax=1,
        square=True,
        cbar_kws={"label": "Correlation"},
        ax=ax,
    )
    plt.setp(ax.get_xticklabels(), rotation=TICK_ROTATION, ha="right")
    ax.set_title("Correlation Heatmap (Numeric Columns)")
    ax.set_xlabel("")
    ax.set_ylabel("")
    return fig


def render_figures(
    df: pd.DataFrame,
    corr: Optional[pd.DataFrame] = None,
    output_dir: Optional[str] = None,
    show: bool = False,
) -> Dict[str, object]:
    """
    Build every applicable chart.

    Parameters
    ----------
    df : pd.DataFrame
        Cleaned listings table.
    corr : pd.DataFrame or None
        Correlation matrix from `src.analysis.summarize.correlation_matrix`.
    output_dir : str or None
        If given, each chart is written to ``<output_dir>/<name>.png`` and
        closed.
    show : bool
        Display the charts with ``plt.show()``.

    Returns
    -------
    dict
        Chart name -> saved file path when `output_dir` is given, otherwise
        chart name -> Figure. Skipped charts are absent.
    """
    apply_style()
    candidates = {
        "price_distribution": plot_price_distribution(df),
        "price_by_room_type": plot_price_by_room_type(df),
        "price_vs_minimum_nights": plot_price_vs_minimum_nights(df),
        "geographic_distribution": plot_geographic_distribution(df),
        "correlation_heatmap": plot_correlation_heatmap(corr),
    }
    figures = {name: fig for name, fig in candidates.items() if fig is not None}

    results: Dict[str, object] = dict(figures)
    try:
        if output_dir is not None:
            os.makedirs(output_dir, exist_ok=True)
            for name, fig in figures.items():
                path = os.path.join(output_dir, f"{name}.png")
                fig.savefig(path, bbox_inches="tight")
                results[name] = path

        if show:
            plt.show()
    finally:
        if output_dir is not None:
            for fig in figures.values():
                plt.close(fig)

    return results
