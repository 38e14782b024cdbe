"""
Trailing Moving Average

Smooths one parameter of an observation series with a trailing window of
W samples (default 24, one day of hourly readings). The output has one
entry per input row; an entry is None when its window holds no valid
sample, so charts draw a gap instead of a dip to zero.

Single pass, O(n): a running sum and running valid-count are adjusted as
the window slides. Missing values never enter either.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ocean_intel.constants.thresholds import DEFAULT_MA_WINDOW
from ocean_intel.core.errors import ValidationError
from ocean_intel.core.records import as_record, to_number

logger = logging.getLogger(__name__)


def compute_moving_average(
    series: Sequence[Any],
    parameter_key: str,
    window_size: int = DEFAULT_MA_WINDOW
) -> List[Optional[float]]:
    """
    Compute the trailing moving average of one parameter.

    Position i averages the valid values in rows [max(0, i-W+1), i].

    Args:
        series: Observation rows (mappings or Observation models)
        parameter_key: Parameter to smooth
        window_size: Trailing window length W (>= 1)

    Returns:
        List the same length as series; None where the window is empty

    Raises:
        ValidationError: if window_size < 1
    """
    if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 1:
        raise ValidationError(
            f"window_size must be a positive integer, got {window_size!r}",
            details={"field": "window_size"}
        )

    samples = [to_number(as_record(row, i).get(parameter_key)) for i, row in enumerate(series)]

    averages: List[Optional[float]] = []
    running_sum = 0.0
    running_count = 0

    for i, value in enumerate(samples):
        if value is not None:
            running_sum += value
            running_count += 1

        leaving = i - window_size
        if leaving >= 0 and samples[leaving] is not None:
            running_sum -= samples[leaving]
            running_count -= 1

        averages.append(running_sum / running_count if running_count > 0 else None)

    gaps = sum(1 for a in averages if a is None)
    if gaps:
        logger.debug(f"Moving average for '{parameter_key}' (W={window_size}) has {gaps} empty window(s)")

    return averages


def attach_moving_averages(
    series: Sequence[Any],
    parameter_keys: Iterable[str],
    window_size: int = DEFAULT_MA_WINDOW
) -> List[Dict[str, Any]]:
    """
    Return copies of the rows with a "<key>_ma" column per parameter.

    The input rows are not modified.

    Args:
        series: Observation rows
        parameter_keys: Parameters to smooth
        window_size: Trailing window length

    Returns:
        New list of dict rows
    """
    rows = [dict(as_record(row, i)) for i, row in enumerate(series)]

    for key in parameter_keys:
        for row, average in zip(rows, compute_moving_average(series, key, window_size)):
            row[f"{key}_ma"] = average

    return rows
