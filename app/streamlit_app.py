import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from src.analysis.summarize import Summary, summarize
from src.config import DATA_PATH, ENCODING
from src.data.clean_data import CleaningResult, clean_listings
from src.data.load_data import load_listings, preview
from src.reporting.report import KEY_OBSERVATIONS
from src.visualization.plots import render_figures

st.set_page_config(page_title="Airbnb NYC Listings EDA", layout="wide")
st.title("Airbnb NYC Listings EDA")

@st.cache_data
def load_df(path: str, encoding: str) -> pd.DataFrame:
    return load_listings(path, encoding=encoding)

@st.cache_data
def clean_df(df: pd.DataFrame) -> CleaningResult:
    return clean_listings(df)

@st.cache_data
def summarize_df(df: pd.DataFrame) -> Summary:
    return summarize(df)

st.sidebar.header("Data Source")
path = st.sidebar.text_input("CSV path", value=DATA_PATH)
encoding = st.sidebar.text_input("Encoding", value=ENCODING)

try:
    raw = load_df(path, encoding)
except (OSError, pd.errors.ParserError) as e:
    st.error(f"Could not load {path}: {e}")
    st.stop()

cleaning = clean_df(raw)
df = cleaning.df
summary = summarize_df(df)

col1, col2 = st.columns(2)
col1.metric("Rows", f"{raw.shape[0]:,}")
col2.metric("Columns", raw.shape[1])

st.subheader("Preview")
st.dataframe(preview(raw))

st.subheader("Cleaning")
if cleaning.dropped_columns:
    st.write("Dropped empty columns:", ", ".join(cleaning.dropped_columns))
if "price" in df.columns:
    st.write(f"Removed {cleaning.removed_rows:,} rows with zero or negative price.")
st.dataframe(cleaning.missing_counts.rename("missing").to_frame())

st.subheader("Descriptive Statistics")
st.dataframe(summary.describe)

with st.expander("Structure"):
    st.dataframe(summary.structure)
    for kind, table in summary.skim.items():
        if not table.empty:
            st.caption(f"Column type: {kind}")
            st.dataframe(table)

st.subheader("Charts")
figures = render_figures(df, summary.correlation)
for fig in figures.values():
    st.pyplot(fig)
    plt.close(fig)

st.markdown("---")
st.subheader("Key Observations")
for heading, note in KEY_OBSERVATIONS:
    st.markdown(f"**{heading}:** {note}")
