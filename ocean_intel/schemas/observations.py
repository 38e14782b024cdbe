"""
Observation Schemas

Pydantic models for environmental time series and their derived
statistics.

An Observation is one timestamped row. Parameter values are carried as
extra fields keyed by parameter name (sea_surface_temp, WTMP, ...) so the
same model serves live and archive series. Missing values stay None.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from ocean_intel.constants.thresholds import DEFAULT_MA_WINDOW


class Observation(BaseModel):
    """
    Single timestamped reading.

    Extra keys hold parameter values (float or None).
    """
    timestamp: Optional[datetime] = Field(None, description="Reading time (non-decreasing within a series)")

    model_config = ConfigDict(extra="allow", frozen=True)


class ParameterStats(BaseModel):
    """
    Descriptive statistics and anomaly counts for one parameter.

    Matches analytics.stats.compute_stats() output.
    """
    mean: float = Field(..., description="Mean of valid values (0 when none)")
    std_dev: float = Field(..., description="Population standard deviation", ge=0)
    min: float = Field(..., description="Smallest valid value")
    max: float = Field(..., description="Largest valid value")
    count: int = Field(..., description="Number of valid values", ge=0)
    anomaly_count: int = Field(..., description="moderate_count + extreme_count", ge=0)
    moderate_count: int = Field(..., description="Values with 2 <= |z| < 3", ge=0)
    extreme_count: int = Field(..., description="Values with |z| >= 3", ge=0)

    model_config = ConfigDict(extra="forbid")


# ============================================================================
# Request Schemas
# ============================================================================

class StatsRequest(BaseModel):
    """Body for POST /analytics/stats."""
    series: List[Observation] = Field(..., description="Observation rows")
    parameter_keys: List[str] = Field(..., min_length=1, description="Parameters to summarize")


class MovingAverageRequest(BaseModel):
    """Body for POST /analytics/moving-average."""
    series: List[Observation] = Field(..., description="Observation rows")
    parameter_key: str = Field(..., description="Parameter to smooth")
    window_size: int = Field(DEFAULT_MA_WINDOW, ge=1, description="Trailing window length")

