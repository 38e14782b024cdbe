"""
Threshold Constants

Centralized weights, bands and thresholds used by the analytics engine.

IMPORTANT: These values are fixed design choices, not runtime settings.
Do not modify without updating the corresponding tests.

Values are documented with SYNC comments showing which module uses them.
"""

import math
from typing import List, Tuple

# ============================================================================
# Anomaly Detection
# SYNC WITH: ocean_intel/analytics/stats.py
# ============================================================================

MODERATE_Z_THRESHOLD = 2.0  # 2.0 <= |z| < 3.0 → moderate
EXTREME_Z_THRESHOLD = 3.0   # |z| >= 3.0 → extreme


# ============================================================================
# Smoothing
# SYNC WITH: ocean_intel/analytics/smoothing.py
# ============================================================================

DEFAULT_MA_WINDOW = 24  # Trailing samples (24 hourly readings = 1 day)


# ============================================================================
# Species Sustainability Score
# SYNC WITH: ocean_intel/algorithms/sustainability.py
# ============================================================================

WEIGHT_STOCK_HEALTH = 0.40
WEIGHT_TEMP_SUITABILITY = 0.40
WEIGHT_WAVE_SAFETY = 0.20

SCORE_EXCELLENT_MIN = 70  # Score >= 70 = Excellent
SCORE_MODERATE_MIN = 50   # 50 <= Score < 70 = Moderate
# Below 50 = Critical Warning


# ============================================================================
# Alerts
# SYNC WITH: ocean_intel/analytics/alerts.py
# ============================================================================

ROUGH_SEA_WAVE_HEIGHT = 3.0    # wave_height > 3 m → danger
LOW_SUSTAINABILITY_SCORE = 60  # score < 60 → warning
LOW_STOCK_HEALTH = 50          # stock_health < 50 → warning


# ============================================================================
# Risk Framework
# SYNC WITH: ocean_intel/algorithms/risk_framework.py
# ============================================================================

MSY_PRESSURE_CAP = 120.0  # MSY utilization (%) is capped before weighting

# Sustainability index weights (must sum to 1.0)
INDEX_WEIGHT_STOCK_HEALTH = 0.50
INDEX_WEIGHT_MSY_HEADROOM = 0.25
INDEX_WEIGHT_TREND = 0.15
INDEX_WEIGHT_CLIMATE = 0.10

# Collapse risk weights (must sum to 1.0)
RISK_WEIGHT_MSY_PRESSURE = 0.35
RISK_WEIGHT_DECLINING = 0.25
RISK_WEIGHT_STOCK_DEFICIT = 0.25
RISK_WEIGHT_CLIMATE = 0.15

PROJECTION_DECAY = 0.05  # Projected 6-month index loses 5% of current risk

# Climate stress step function: (inclusive upper SST bound in °C, score),
# sorted ascending. SST above the last bound scores CLIMATE_SCORE_MAX.
CLIMATE_BREAKPOINTS: List[Tuple[float, int]] = [
    (26.0, 20),
    (28.0, 40),
    (30.0, 60),
    (math.inf, 90),
]

SUSTAINABLE_INDEX_MIN = 70  # Index >= 70 = Sustainable
CRITICAL_INDEX_BELOW = 50   # Index < 50 = Critical
# Otherwise Caution

LOW_RISK_BELOW = 30   # Risk < 30 = Low
HIGH_RISK_ABOVE = 60  # Risk > 60 = High
# Otherwise Moderate

CRITICAL_STOCK_HEALTH = 40  # stock_health_percent < 40 counts as a critical species

DECLINING_TRENDS = ("Declining", "Critical")


# ============================================================================
# Helper Functions
# ============================================================================

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves upward.

    Python's round() uses banker's rounding (round(60.5) == 60); scores
    must round x.5 up so equal inputs always land on the same side.

    Example:
        >>> round_half_up(60.5)
        61
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def sustainability_label(score: float) -> str:
    """
    Label for the species-level sustainability score.

    Example:
        >>> sustainability_label(75)
        'Excellent'
        >>> sustainability_label(55)
        'Moderate'
        >>> sustainability_label(20)
        'Critical Warning'

    SYNC WITH: ocean_intel/algorithms/sustainability.py
    """
    if score >= SCORE_EXCELLENT_MIN:
        return "Excellent"
    elif score >= SCORE_MODERATE_MIN:
        return "Moderate"
    else:
        return "Critical Warning"


def sustainability_level(index: float) -> str:
    """
    Level for the risk-framework sustainability index.

    Example:
        >>> sustainability_level(70)
        'Sustainable'
        >>> sustainability_level(50)
        'Caution'
        >>> sustainability_level(49)
        'Critical'
    """
    if index >= SUSTAINABLE_INDEX_MIN:
        return "Sustainable"
    elif index < CRITICAL_INDEX_BELOW:
        return "Critical"
    else:
        return "Caution"


def risk_level(risk_score: float) -> str:
    """
    Level for the collapse-risk score.

    Example:
        >>> risk_level(29)
        'Low'
        >>> risk_level(60)
        'Moderate'
        >>> risk_level(61)
        'High'
    """
    if risk_score < LOW_RISK_BELOW:
        return "Low"
    elif risk_score > HIGH_RISK_ABOVE:
        return "High"
    else:
        return "Moderate"
