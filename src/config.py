"""
Central configuration for the project.

This module centralizes the input location, the CSV reading options and the
plot constants used throughout the codebase. Paths can be overridden through
environment variables.

Constants
---------
BASE_DIR : str
    Absolute path to the project `src` parent directory.
DATA_DIR, RAW_DATA_DIR : str
    Paths to data folders.
DATA_PATH : str
    Listings CSV to analyse (env: AIRBNB_NYC_DATA).
ENCODING : str
    Character set used to decode the CSV (env: AIRBNB_NYC_ENCODING).
NA_VALUES : list of str
    Tokens read as missing values.
FIGURES_DIR : str
    Output folder for rendered charts (env: AIRBNB_NYC_FIGURES).
"""

import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, "data")
RAW_DATA_DIR = os.path.join(DATA_DIR, "raw")
REPORTS_DIR = os.path.join(BASE_DIR, "reports")

DATA_PATH = os.getenv("AIRBNB_NYC_DATA", os.path.join(RAW_DATA_DIR, "AB_NYC_2019.csv"))
ENCODING = os.getenv("AIRBNB_NYC_ENCODING", "latin1")
NA_VALUES = ["", "NA"]
FIGURES_DIR = os.getenv("AIRBNB_NYC_FIGURES", os.path.join(REPORTS_DIR, "figures"))

PREVIEW_ROWS = 10

# plots
HIST_BINS = 50
PRICE_CLAMP = (0, 1000)
MIN_NIGHTS_CLAMP = (0, 100)
POINT_ALPHA = 0.3
OUTLIER_ALPHA = 0.4
HEATMAP_CMAP = "bwr"
TICK_ROTATION = 45
