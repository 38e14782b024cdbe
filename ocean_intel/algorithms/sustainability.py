"""
Species Sustainability Score

Fleet-wide score (0-100) blending three components over the species list:

- Average stock health          (40%)
- % species whose SST band holds the current SST   (40%)
- % species whose wave limit tolerates current waves (20%)

Weights are fixed. An empty species list scores 0.
"""

import logging
from typing import Any, Sequence

from ocean_intel.constants.thresholds import (
    WEIGHT_STOCK_HEALTH,
    WEIGHT_TEMP_SUITABILITY,
    WEIGHT_WAVE_SAFETY,
    clamp,
    round_half_up,
)
from ocean_intel.core.errors import missing_field
from ocean_intel.core.records import as_record, require_field, require_number

logger = logging.getLogger(__name__)


def calculate_sustainability_score(species_list: Sequence[Any], conditions: Any) -> int:
    """
    Calculate the sustainability score for a species list.

    Args:
        species_list: SpeciesRecord models or mappings
        conditions: {"sea_surface_temp": float, "wave_height": float}

    Returns:
        Integer score in [0, 100]; 0 for an empty list

    Raises:
        ValidationError: if a species or the conditions lack a required field
    """
    if not species_list:
        return 0

    snapshot = as_record(conditions)
    temp = require_number(snapshot, "sea_surface_temp")
    wave = require_number(snapshot, "wave_height")

    total = len(species_list)
    health_sum = 0.0
    temp_ok = 0
    wave_ok = 0

    for index, item in enumerate(species_list):
        species = as_record(item, index)

        health_sum += clamp(require_number(species, "stock_health", index))

        bounds = require_field(species, "temp_range", index)
        try:
            low, high = float(bounds[0]), float(bounds[1])
        except (TypeError, ValueError, IndexError):
            raise missing_field("temp_range", index)
        if low <= temp <= high:
            temp_ok += 1

        if require_number(species, "max_wave_height", index) >= wave:
            wave_ok += 1

    avg_stock_health = health_sum / total
    temp_score = temp_ok / total * 100
    wave_score = wave_ok / total * 100

    score = (
        avg_stock_health * WEIGHT_STOCK_HEALTH +
        temp_score * WEIGHT_TEMP_SUITABILITY +
        wave_score * WEIGHT_WAVE_SAFETY
    )
    score = round_half_up(clamp(score))

    logger.info(
        f"Sustainability score {score} (stock={avg_stock_health:.1f}, "
        f"temp={temp_score:.0f}%, wave={wave_score:.0f}%, n={total})"
    )

    return score
