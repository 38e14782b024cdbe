"""
Risk Framework Schemas

Pydantic models for regional stock assessment records and the
sustainability / collapse-risk bundle.

Matches algorithms.risk_framework.score_risk() output.
"""

from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ocean_intel.constants.thresholds import clamp
from ocean_intel.schemas.fisheries import Trend


class StockRecord(BaseModel):
    """
    Regional stock assessment row.

    msy_tonnes <= 0 is accepted here; the risk framework excludes such rows
    from the MSY utilization mean instead of dividing by zero.
    """
    id: Union[int, str] = Field(..., description="Record identifier")
    region: str = Field(..., description="Assessment region")
    species: str = Field(..., description="Species name")
    stock_health_percent: float = Field(..., description="Stock health (0-100)")
    trend: Trend = Field(..., description="Stock trend")
    msy_tonnes: float = Field(..., description="Maximum sustainable yield (t)")
    current_catch_tonnes: float = Field(..., description="Current catch (t)", ge=0)
    protected: bool = Field(False, description="Under legal protection")

    model_config = ConfigDict(extra="allow")

    @field_validator("stock_health_percent")
    @classmethod
    def _clamp_health(cls, value: float) -> float:
        return clamp(value)


class CollapseRisk(BaseModel):
    score: int = Field(..., ge=0, le=100)
    level: str = Field(..., description="Low / Moderate / High")


class ClimateStress(BaseModel):
    sst: float = Field(..., description="SST signal (°C, 1 dp)")
    score: int = Field(..., description="Step-function stress score")


class Projection(BaseModel):
    index_6_month: int = Field(..., ge=0, le=100)
    change: int = Field(..., description="Projected minus current index")


class RiskStats(BaseModel):
    count: int = Field(..., ge=0)
    avg_stock_health: int
    msy_utilization: Optional[int] = Field(None, description="Mean catch/MSY (%), None when no valid MSY")
    declining_percent: int
    critical_species_count: int


class RiskResult(BaseModel):
    """
    Complete risk framework bundle.

    When no record matches, score_risk() returns only {"count": 0}; that
    shape is NOT a RiskResult.
    """
    region: str
    sustainability_index: int = Field(..., ge=0, le=100)
    sustainability_level: str = Field(..., description="Sustainable / Caution / Critical")
    collapse_risk: CollapseRisk
    climate_stress: ClimateStress
    projection: Projection
    stats: RiskStats
    data: List[Dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class RiskRequest(BaseModel):
    """Body for POST /fisheries/risk."""
    stocks: List[StockRecord] = Field(..., description="Stock assessment records")
    sst: float = Field(..., description="Climate signal: sea-surface temperature (°C)")
    region: Optional[str] = Field(None, description="Optional region filter (case-insensitive)")
