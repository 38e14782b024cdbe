"""
Algorithms Package

Deterministic fisheries scoring:
- suitability: ordered rule table deciding whether a species may be fished
- sustainability: weighted species-level sustainability score (0-100)
- risk_framework: stock-based sustainability index, collapse risk and projection

All algorithms use deterministic calculations (no randomness, no I/O).
"""

from ocean_intel.algorithms.suitability import (
    EvaluationContext,
    SUITABILITY_RULES,
    evaluate_suitability
)
from ocean_intel.algorithms.sustainability import calculate_sustainability_score
from ocean_intel.algorithms.risk_framework import (
    climate_stress_score,
    filter_stocks_by_region,
    score_risk
)

__all__ = [
    "EvaluationContext",
    "SUITABILITY_RULES",
    "evaluate_suitability",
    "calculate_sustainability_score",
    "climate_stress_score",
    "filter_stocks_by_region",
    "score_risk"
]
