"""
Analytics Package

Time-series analytics and alerting for ocean observations:
- Stats: per-parameter statistics with z-score anomaly counts
- Smoothing: trailing moving averages tolerant of missing values
- Alerts: categorized fisheries alerts
- Overview: species dashboard bundle (suitability, score, alerts)

All functions are pure and synchronous; inputs are never modified.
"""

from ocean_intel.analytics.stats import compute_stats, compute_series_stats, classify_z
from ocean_intel.analytics.smoothing import compute_moving_average, attach_moving_averages
from ocean_intel.analytics.alerts import generate_alerts
from ocean_intel.analytics.overview import evaluate_fishery

__all__ = [
    "compute_stats",
    "compute_series_stats",
    "classify_z",
    "compute_moving_average",
    "attach_moving_averages",
    "generate_alerts",
    "evaluate_fishery"
]
