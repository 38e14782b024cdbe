"""
Parameter Statistics and Anomaly Detection

Descriptive statistics (mean, population std-dev, min, max) for one
parameter of an observation series, plus z-score anomaly classification:

- moderate: 2.0 <= |z| < 3.0
- extreme:  |z| >= 3.0

Two passes over the series: the first collects valid values and the
mean/std-dev, the second classifies every valid value against them.
Missing values (None, NaN, non-numeric) are excluded from both passes.

All computations are deterministic and side-effect free.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Sequence

from ocean_intel.constants.thresholds import MODERATE_Z_THRESHOLD, EXTREME_Z_THRESHOLD
from ocean_intel.core.records import as_record, to_number

logger = logging.getLogger(__name__)


# ============================================================================
# Statistics
# ============================================================================

def _empty_stats() -> Dict[str, Any]:
    return {
        "mean": 0.0,
        "std_dev": 0.0,
        "min": 0.0,
        "max": 0.0,
        "count": 0,
        "anomaly_count": 0,
        "moderate_count": 0,
        "extreme_count": 0,
    }


def valid_values(series: Iterable[Any], parameter_key: str) -> List[float]:
    """
    Collect the valid samples of one parameter, in series order.

    Args:
        series: Observation rows (mappings or Observation models)
        parameter_key: Parameter to read from each row

    Returns:
        List of floats; zero is a valid sample, missing values are skipped
    """
    values = []
    for index, row in enumerate(series):
        number = to_number(as_record(row, index).get(parameter_key))
        if number is not None:
            values.append(number)
    return values


def classify_z(z: float) -> str:
    """
    Classify a z-score.

    Returns:
        "extreme", "moderate" or "normal"

    Example:
        >>> classify_z(2.0)
        'moderate'
        >>> classify_z(-3.0)
        'extreme'
        >>> classify_z(1.99)
        'normal'
    """
    magnitude = abs(z)
    if magnitude >= EXTREME_Z_THRESHOLD:
        return "extreme"
    elif magnitude >= MODERATE_Z_THRESHOLD:
        return "moderate"
    return "normal"


def compute_stats(series: Sequence[Any], parameter_key: str) -> Dict[str, Any]:
    """
    Compute statistics and anomaly counts for one parameter.

    Args:
        series: Observation rows (mappings or Observation models)
        parameter_key: Parameter to summarize (e.g. "sea_surface_temp", "WTMP")

    Returns:
        {
            "mean": float,
            "std_dev": float (population),
            "min": float,
            "max": float,
            "count": int (valid samples),
            "anomaly_count": int,
            "moderate_count": int,
            "extreme_count": int
        }
        All zeros when the series holds no valid value for the parameter.
    """
    values = valid_values(series, parameter_key)

    if not values:
        logger.debug(f"No valid samples for '{parameter_key}' in {len(series)} rows")
        return _empty_stats()

    # Pass 1: location and spread over the complete series
    count = len(values)
    low, high = min(values), max(values)
    if low == high:
        # Constant series: exact mean, no spread
        mean, std_dev = values[0], 0.0
    else:
        # Mean stays within [low, high]
        mean = min(max(math.fsum(values) / count, low), high)
        variance = math.fsum((x - mean) ** 2 for x in values) / count
        std_dev = math.sqrt(variance)

    # Pass 2: classify against the full-series mean/std-dev
    moderate_count = 0
    extreme_count = 0
    for x in values:
        z = (x - mean) / std_dev if std_dev > 0 else 0.0
        band = classify_z(z)
        if band == "extreme":
            extreme_count += 1
        elif band == "moderate":
            moderate_count += 1

    result = {
        "mean": mean,
        "std_dev": std_dev,
        "min": low,
        "max": high,
        "count": count,
        "anomaly_count": moderate_count + extreme_count,
        "moderate_count": moderate_count,
        "extreme_count": extreme_count,
    }

    logger.debug(
        f"Stats for '{parameter_key}': n={count} mean={mean:.3f} std={std_dev:.3f} "
        f"anomalies={result['anomaly_count']}"
    )

    return result


def compute_series_stats(series: Sequence[Any], parameter_keys: Iterable[str]) -> Dict[str, Dict[str, Any]]:
    """
    Compute stats for several parameters of the same series.

    Args:
        series: Observation rows
        parameter_keys: Parameters to summarize

    Returns:
        {parameter_key: compute_stats(...)} in the order given
    """
    return {key: compute_stats(series, key) for key in parameter_keys}
