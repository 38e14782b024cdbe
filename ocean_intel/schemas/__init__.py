"""
Pydantic Schemas Package

Typed models for the engine's data model and the HTTP request/response
bodies. Engine functions also accept plain dicts with the same keys.

Export Groups:
- Base: ApiResponse, ErrorResponse
- Observations: Observation, ParameterStats, request bodies
- Fisheries: SpeciesRecord, CurrentConditions, SuitabilityResult, Alert, overview
- Risk: StockRecord, RiskResult and its parts
"""

# Base schemas
from ocean_intel.schemas.base import (
    ApiResponse,
    ErrorResponse
)

# Observation schemas
from ocean_intel.schemas.observations import (
    Observation,
    ParameterStats,
    StatsRequest,
    MovingAverageRequest
)

# Fisheries schemas
from ocean_intel.schemas.fisheries import (
    SpeciesRecord,
    CurrentConditions,
    SuitabilityResult,
    Alert,
    SpeciesEvaluation,
    FisheryOverview,
    OverviewRequest
)

# Risk framework schemas
from ocean_intel.schemas.risk import (
    StockRecord,
    CollapseRisk,
    ClimateStress,
    Projection,
    RiskStats,
    RiskResult,
    RiskRequest
)

__all__ = [
    # Base
    "ApiResponse",
    "ErrorResponse",
    # Observations
    "Observation",
    "ParameterStats",
    "StatsRequest",
    "MovingAverageRequest",
    # Fisheries
    "SpeciesRecord",
    "CurrentConditions",
    "SuitabilityResult",
    "Alert",
    "SpeciesEvaluation",
    "FisheryOverview",
    "OverviewRequest",
    # Risk
    "StockRecord",
    "CollapseRisk",
    "ClimateStress",
    "Projection",
    "RiskStats",
    "RiskResult",
    "RiskRequest"
]
