"""
Species Suitability Evaluation

Decides whether one species may be fished under the current conditions.
Rules are an ordered table evaluated first-match-wins:

1. legally protected
2. outside the open season
3. sea-surface temperature outside the species band
4. wave height above the species safety limit

Legal constraints come before physical ones, so the reported reason is the
most legally significant blocking factor. Only the fields a rule needs are
read, and only when that rule is reached.

The evaluation month is an explicit EvaluationContext, never read from the
clock inside the rules.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ocean_intel.core.errors import missing_field
from ocean_intel.core.records import as_record, require_field, require_number

logger = logging.getLogger(__name__)

SUITABLE_REASON = "Conditions optimal for sustainable catch."


# ============================================================================
# Evaluation Context
# ============================================================================

@dataclass(frozen=True)
class EvaluationContext:
    """Calendar context for rule evaluation."""
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be within 1-12, got {self.month}")

    @classmethod
    def now(cls) -> "EvaluationContext":
        """Context for the current wall-clock month."""
        return cls(month=datetime.now().month)


# ============================================================================
# Rule Table
# ============================================================================

@dataclass(frozen=True)
class SuitabilityRule:
    """
    One blocking rule.

    blocks(species, conditions, context) -> True when the rule rejects;
    reason(species, conditions, context) -> message reported for it.
    """
    name: str
    blocks: Callable[[Mapping[str, Any], Mapping[str, Any], EvaluationContext], bool]
    reason: Callable[[Mapping[str, Any], Mapping[str, Any], EvaluationContext], str]


def _fmt(value: float) -> str:
    # 3.0 -> "3", 25.5 -> "25.5"
    return f"{value:g}"


def _temp_range(species: Mapping[str, Any]) -> Tuple[float, float]:
    bounds = require_field(species, "temp_range")
    try:
        low, high = bounds
        return float(low), float(high)
    except (TypeError, ValueError):
        raise missing_field("temp_range")


def _season_months(species: Mapping[str, Any]) -> set:
    months = require_field(species, "season_months")
    try:
        return {int(m) for m in months}
    except (TypeError, ValueError):
        raise missing_field("season_months")


def _is_protected(species, conditions, context) -> bool:
    return require_field(species, "legal_status") == "Protected"


def _out_of_season(species, conditions, context) -> bool:
    return context.month not in _season_months(species)


def _temp_out_of_range(species, conditions, context) -> bool:
    temp = require_number(conditions, "sea_surface_temp")
    low, high = _temp_range(species)
    return temp < low or temp > high


def _waves_too_high(species, conditions, context) -> bool:
    wave = require_number(conditions, "wave_height")
    return wave > require_number(species, "max_wave_height")


def _temp_reason(species, conditions, context) -> str:
    temp = require_number(conditions, "sea_surface_temp")
    low, high = _temp_range(species)
    return f"Water temp ({_fmt(temp)}°C) outside optimal range ({_fmt(low)}-{_fmt(high)}°C)."


def _wave_reason(species, conditions, context) -> str:
    wave = require_number(conditions, "wave_height")
    limit = require_number(species, "max_wave_height")
    return f"Wave height ({_fmt(wave)}m) exceeds safety limit ({_fmt(limit)}m)."


SUITABILITY_RULES: Tuple[SuitabilityRule, ...] = (
    SuitabilityRule(
        name="protected",
        blocks=_is_protected,
        reason=lambda s, c, ctx: "Species is legally protected. Conservation active.",
    ),
    SuitabilityRule(
        name="season",
        blocks=_out_of_season,
        reason=lambda s, c, ctx: "Outside of legal fishing season.",
    ),
    SuitabilityRule(name="temperature", blocks=_temp_out_of_range, reason=_temp_reason),
    SuitabilityRule(name="waves", blocks=_waves_too_high, reason=_wave_reason),
)


# ============================================================================
# Evaluation
# ============================================================================

def evaluate_suitability(
    species: Any,
    conditions: Any,
    context: Optional[EvaluationContext] = None
) -> Dict[str, Any]:
    """
    Evaluate one species against current conditions.

    Args:
        species: SpeciesRecord (model or mapping)
        conditions: {"sea_surface_temp": float, "wave_height": float}
        context: Evaluation month; defaults to EvaluationContext.now()

    Returns:
        {"suitable": bool, "reason": str} with the reason of the FIRST
        blocking rule, or the optimal-conditions message

    Raises:
        ValidationError: if a field needed by a reached rule is missing
    """
    record = as_record(species)
    snapshot = as_record(conditions)
    context = context or EvaluationContext.now()

    for rule in SUITABILITY_RULES:
        if rule.blocks(record, snapshot, context):
            logger.debug(f"Species '{record.get('name')}' blocked by rule '{rule.name}'")
            return {"suitable": False, "reason": rule.reason(record, snapshot, context)}

    return {"suitable": True, "reason": SUITABLE_REASON}
