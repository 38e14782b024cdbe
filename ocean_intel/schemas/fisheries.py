"""
Fisheries Schemas

Pydantic models for the species-level evaluation:
- SpeciesRecord reference data
- CurrentConditions snapshot
- Suitability results, alerts and the overview bundle

Matches algorithms.suitability, algorithms.sustainability, analytics.alerts
and analytics.overview outputs.
"""

from typing import List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from ocean_intel.constants.thresholds import clamp

LegalStatus = Literal["Open", "Restricted", "Protected"]
Trend = Literal["Stable", "Declining", "Critical", "Improving"]
AlertType = Literal["info", "warning", "danger"]


class SpeciesRecord(BaseModel):
    """
    Regulatory and biological constraints for one species.

    temp_range is (low, high) in °C with low <= high; stock_health is
    clamped into [0, 100].
    """
    id: Union[int, str] = Field(..., description="Species identifier")
    name: str = Field(..., description="Common name")
    temp_range: Tuple[float, float] = Field(..., description="Suitable SST band (°C), inclusive")
    max_wave_height: float = Field(..., description="Wave safety limit (m)", ge=0)
    season_months: List[int] = Field(..., description="Open season months (1-12)")
    legal_status: LegalStatus = Field(..., description="Open / Restricted / Protected")
    stock_health: float = Field(..., description="Stock health (0-100)")
    trend: Trend = Field("Stable", description="Stock trend")

    model_config = ConfigDict(extra="allow")

    @field_validator("season_months")
    @classmethod
    def _months_in_calendar(cls, months: List[int]) -> List[int]:
        bad = [m for m in months if not 1 <= m <= 12]
        if bad:
            raise ValueError(f"season_months must be within 1-12, got {bad}")
        return months

    @field_validator("stock_health")
    @classmethod
    def _clamp_stock_health(cls, value: float) -> float:
        return clamp(value)

    @model_validator(mode="after")
    def _ordered_temp_range(self) -> "SpeciesRecord":
        low, high = self.temp_range
        if low > high:
            raise ValueError(f"temp_range low ({low}) must not exceed high ({high})")
        return self


class CurrentConditions(BaseModel):
    """Latest environmental snapshot used for species evaluation."""
    sea_surface_temp: float = Field(..., description="Sea-surface temperature (°C)")
    wave_height: float = Field(..., description="Significant wave height (m)")

    model_config = ConfigDict(extra="allow")


class SuitabilityResult(BaseModel):
    """Matches algorithms.suitability.evaluate_suitability() output."""
    suitable: bool
    reason: str


class Alert(BaseModel):
    """Matches analytics.alerts.generate_alerts() items."""
    type: AlertType
    message: str


class SpeciesEvaluation(BaseModel):
    """One species with its suitability verdict."""
    species: SpeciesRecord
    result: SuitabilityResult


class FisheryOverview(BaseModel):
    """
    Species overview bundle.

    Matches analytics.overview.evaluate_fishery() output.
    """
    evaluations: List[SpeciesEvaluation]
    suitable_count: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    sustainability_score: int = Field(..., ge=0, le=100)
    sustainability_label: str
    alerts: List[Alert]


# ============================================================================
# Request Schemas
# ============================================================================

class OverviewRequest(BaseModel):
    """Body for POST /fisheries/overview."""
    species: Optional[List[SpeciesRecord]] = Field(
        None, description="Species reference records (defaults to the species dataset)"
    )
    conditions: CurrentConditions = Field(..., description="Current conditions snapshot")
    month: Optional[int] = Field(None, ge=1, le=12, description="Evaluation month (defaults to current)")
