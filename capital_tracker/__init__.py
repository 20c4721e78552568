"""
Capital Tracker - Net Worth Time Series Core

Maintains a sparse, one-entry-per-day series of capital snapshots and derives
moving averages, a least-squares trendline, goal progress and chart
coordinates for display.
"""

__version__ = "0.1.0"
__author__ = "Capital Tracker Team"
