"""
Data package for loading and cleaning the listings table.

This package exposes functions to read the Airbnb NYC listings CSV and to
apply the cleaning steps (empty-column drop, missing-value counts, price
filter) before analysis.
"""
