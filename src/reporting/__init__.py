"""
Reporting package: console output of the EDA results and the fixed key
observations.
"""
