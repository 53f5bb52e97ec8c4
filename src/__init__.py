"""
src package initializer.

This package contains the project source code for loading, cleaning,
summarizing and plotting the Airbnb NYC 2019 listings dataset.

Modules
-------
- config: Central configuration and path constants.
- data: Listing CSV loading and cleaning.
- analysis: Descriptive statistics and correlation.
- visualization: Charts.
- reporting: Console output and key observations.
- eda: End-to-end pipeline (`python -m src.eda`).
"""
