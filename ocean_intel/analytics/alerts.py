"""
Fisheries Alert Generation

Turns thresholds crossed by the current conditions, the sustainability
score and the species list into categorized alerts:

- danger:  rough sea (wave height above 3 m)
- warning: low sustainability score (below 60)
- warning: species stock under pressure (stock health below 50)
- info:    species under legal protection

Alerts are emitted in rule order, species rules in list order. Nothing is
sorted, de-duplicated or suppressed.
"""

import logging
from typing import Any, Dict, List, Sequence

from ocean_intel.constants.thresholds import (
    LOW_STOCK_HEALTH,
    LOW_SUSTAINABILITY_SCORE,
    ROUGH_SEA_WAVE_HEIGHT,
)
from ocean_intel.core.records import as_record, require_field, require_number

logger = logging.getLogger(__name__)


def _alert(alert_type: str, message: str) -> Dict[str, str]:
    return {"type": alert_type, "message": message}


def _fmt(value: float) -> str:
    return f"{value:g}"


def generate_alerts(
    species_list: Sequence[Any],
    sustainability_score: float,
    conditions: Any
) -> List[Dict[str, str]]:
    """
    Generate alerts for the current evaluation cycle.

    Args:
        species_list: SpeciesRecord models or mappings
        sustainability_score: Output of calculate_sustainability_score()
        conditions: {"wave_height": float, ...}

    Returns:
        [{"type": "info|warning|danger", "message": str}, ...] in rule order

    Raises:
        ValidationError: if a record lacks a field a rule reads
    """
    alerts = []
    snapshot = as_record(conditions)

    if require_number(snapshot, "wave_height") > ROUGH_SEA_WAVE_HEIGHT:
        alerts.append(_alert(
            "danger",
            "Rough Sea Warning: High waves pose safety risk for small vessels."
        ))

    if sustainability_score < LOW_SUSTAINABILITY_SCORE:
        alerts.append(_alert(
            "warning",
            "Low Sustainability Index: Recommendation to reduce fishing effort."
        ))

    for index, item in enumerate(species_list):
        species = as_record(item, index)
        name = require_field(species, "name", index)

        stock_health = require_number(species, "stock_health", index)
        if stock_health < LOW_STOCK_HEALTH:
            alerts.append(_alert(
                "warning",
                f"Biological Alert: {name} stocks are under pressure ({_fmt(stock_health)}%)."
            ))

        if species.get("legal_status") == "Protected":
            alerts.append(_alert(
                "info",
                f"Conservation: {name} is strictly protected in this area."
            ))

    if alerts:
        logger.info(f"Generated {len(alerts)} fisheries alert(s)")

    return alerts
