"""
Analysis package.

- src.analysis.summarize.summarize() : descriptive statistics, structure
  report and correlation matrix for the cleaned listings table
"""
