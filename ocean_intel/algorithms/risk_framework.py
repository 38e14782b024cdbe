"""
Fisheries Risk Framework

Deterministic scoring of regional stock assessment records against a
climate signal (sea-surface temperature). Produces:

- sustainability index (0-100) and level (Sustainable / Caution / Critical)
- collapse risk (0-100) and level (Low / Moderate / High)
- climate stress score from a step function of SST
- 6-month linear projection of the index

Component terms:
- avg stock health
- MSY pressure: mean catch/MSY (%), capped at 120
- declining percent: share of records trending Declining or Critical
- climate score: (-inf,26] 20, (26,28] 40, (28,30] 60, (30,inf) 90

Records with msy_tonnes <= 0 are left out of the MSY mean. No matching
records yields {"count": 0} and nothing else.
"""

import bisect
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ocean_intel.constants.thresholds import (
    CLIMATE_BREAKPOINTS,
    CRITICAL_STOCK_HEALTH,
    DECLINING_TRENDS,
    INDEX_WEIGHT_CLIMATE,
    INDEX_WEIGHT_MSY_HEADROOM,
    INDEX_WEIGHT_STOCK_HEALTH,
    INDEX_WEIGHT_TREND,
    MSY_PRESSURE_CAP,
    PROJECTION_DECAY,
    RISK_WEIGHT_CLIMATE,
    RISK_WEIGHT_DECLINING,
    RISK_WEIGHT_MSY_PRESSURE,
    RISK_WEIGHT_STOCK_DEFICIT,
    clamp,
    risk_level,
    round_half_up,
    sustainability_level,
)
from ocean_intel.core.errors import ValidationError
from ocean_intel.core.records import as_record, require_field, require_number, to_number

logger = logging.getLogger(__name__)

ALL_REGIONS = "All Regions"

_BREAKPOINT_BOUNDS = [bound for bound, _ in CLIMATE_BREAKPOINTS]


# ============================================================================
# Component Terms
# ============================================================================

def climate_stress_score(sst: float) -> int:
    """
    Map SST (°C) to the climate stress score.

    Each breakpoint is an inclusive upper bound: 26.0 scores 20,
    26.01 scores 40, 30.0 scores 60, 30.01 scores 90.

    Example:
        >>> climate_stress_score(26.0)
        20
        >>> climate_stress_score(28.5)
        60
        >>> climate_stress_score(31)
        90
    """
    position = bisect.bisect_left(_BREAKPOINT_BOUNDS, sst)
    return CLIMATE_BREAKPOINTS[position][1]


def msy_utilization(record: Mapping[str, Any], index: Optional[int] = None) -> Optional[float]:
    """
    Catch as a percentage of MSY for one record.

    Returns:
        current_catch / msy * 100, or None when msy_tonnes is missing,
        non-numeric or <= 0 (utilization undefined)
    """
    msy = to_number(record.get("msy_tonnes"))
    if msy is None or msy <= 0:
        return None
    return require_number(record, "current_catch_tonnes", index) / msy * 100


def filter_stocks_by_region(stock_records: Sequence[Any], region: Optional[str]) -> List[Mapping[str, Any]]:
    """
    Keep records of one region (case-insensitive); all records when region is empty.

    Args:
        stock_records: StockRecord models or mappings
        region: Region name or None

    Returns:
        List of mapping records
    """
    records = [as_record(r, i) for i, r in enumerate(stock_records)]
    if not region or not region.strip():
        return records

    wanted = region.strip().lower()
    return [r for r in records if str(r.get("region", "")).strip().lower() == wanted]


# ============================================================================
# Scoring
# ============================================================================

def score_risk(
    stock_records: Sequence[Any],
    sst: float,
    region: Optional[str] = None
) -> Dict[str, Any]:
    """
    Score stock records against the climate signal.

    Args:
        stock_records: StockRecord models or mappings
        sst: Sea-surface temperature signal (°C)
        region: Optional case-insensitive region filter

    Returns:
        {"count": 0} when no record matches, otherwise:
        {
            "region": str,
            "sustainability_index": int (0-100),
            "sustainability_level": "Sustainable|Caution|Critical",
            "collapse_risk": {"score": int (0-100), "level": "Low|Moderate|High"},
            "climate_stress": {"sst": float (1 dp), "score": int},
            "projection": {"index_6_month": int (0-100), "change": int},
            "stats": {
                "count": int,
                "avg_stock_health": int,
                "msy_utilization": int | None,
                "declining_percent": int,
                "critical_species_count": int
            },
            "data": [records...]
        }

    Raises:
        ValidationError: if sst is not numeric or a record lacks a field
    """
    signal = to_number(sst)
    if signal is None:
        raise ValidationError("Climate signal 'sst' must be numeric", details={"field": "sst"})

    region = region if region and region.strip() else None
    records = filter_stocks_by_region(stock_records, region)

    # Handle edge case: nothing to score
    if not records:
        logger.info(f"No stock records for region '{region or ALL_REGIONS}'")
        return {"count": 0}

    count = len(records)

    health_values = [clamp(require_number(r, "stock_health_percent", i)) for i, r in enumerate(records)]
    avg_stock_health = sum(health_values) / count

    utilizations = []
    for i, r in enumerate(records):
        utilization = msy_utilization(r, i)
        if utilization is None:
            logger.warning(f"Record {r.get('id', i)} has no usable msy_tonnes; excluded from MSY utilization")
            continue
        utilizations.append(utilization)

    avg_msy = sum(utilizations) / len(utilizations) if utilizations else None
    msy_pressure = min(avg_msy, MSY_PRESSURE_CAP) if avg_msy is not None else 0.0

    declining_count = sum(
        1 for i, r in enumerate(records) if require_field(r, "trend", i) in DECLINING_TRENDS
    )
    declining_percent = declining_count / count * 100

    climate_score = climate_stress_score(signal)

    # Weighted composites
    index_raw = (
        avg_stock_health * INDEX_WEIGHT_STOCK_HEALTH +
        (100 - msy_pressure) * INDEX_WEIGHT_MSY_HEADROOM +
        (100 - declining_percent) * INDEX_WEIGHT_TREND +
        (100 - climate_score) * INDEX_WEIGHT_CLIMATE
    )
    sustainability_index = round_half_up(clamp(index_raw))

    risk_raw = (
        msy_pressure * RISK_WEIGHT_MSY_PRESSURE +
        declining_percent * RISK_WEIGHT_DECLINING +
        (100 - avg_stock_health) * RISK_WEIGHT_STOCK_DEFICIT +
        climate_score * RISK_WEIGHT_CLIMATE
    )
    collapse_risk = round_half_up(clamp(risk_raw))

    # Linear decay: higher current risk erodes the projected index
    projected_raw = sustainability_index - collapse_risk * PROJECTION_DECAY
    projected_index = round_half_up(clamp(projected_raw))

    result = {
        "region": region or ALL_REGIONS,
        "sustainability_index": sustainability_index,
        "sustainability_level": sustainability_level(sustainability_index),
        "collapse_risk": {
            "score": collapse_risk,
            "level": risk_level(collapse_risk),
        },
        "climate_stress": {
            "sst": round(signal, 1),
            "score": climate_score,
        },
        "projection": {
            "index_6_month": projected_index,
            "change": round_half_up(projected_raw - sustainability_index),
        },
        "stats": {
            "count": count,
            "avg_stock_health": round_half_up(avg_stock_health),
            "msy_utilization": round_half_up(avg_msy) if avg_msy is not None else None,
            "declining_percent": round_half_up(declining_percent),
            "critical_species_count": sum(1 for h in health_values if h < CRITICAL_STOCK_HEALTH),
        },
        "data": [dict(r) for r in records],
    }

    logger.info(
        f"Risk framework for {result['region']}: index={sustainability_index} "
        f"({result['sustainability_level']}), risk={collapse_risk} "
        f"({result['collapse_risk']['level']}), sst={signal:.1f}"
    )

    return result
