"""Aggregation module for derived city ratings.

- Reads rating rows through the repository and produces averages
- Averages are derived on every read, never stored
- Forbidden: mutations of any kind
"""
