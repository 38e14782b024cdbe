"""
Fishery Overview

One call bundling everything a species dashboard shows for a snapshot:
per-species suitability, how many species are fishable, the sustainability
score with its label, and the alert list derived from that score.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from ocean_intel.algorithms.suitability import EvaluationContext, evaluate_suitability
from ocean_intel.algorithms.sustainability import calculate_sustainability_score
from ocean_intel.analytics.alerts import generate_alerts
from ocean_intel.constants.thresholds import sustainability_label
from ocean_intel.core.records import as_record

logger = logging.getLogger(__name__)


def evaluate_fishery(
    species_list: Sequence[Any],
    conditions: Any,
    context: Optional[EvaluationContext] = None
) -> Dict[str, Any]:
    """
    Evaluate a species list against one conditions snapshot.

    Args:
        species_list: SpeciesRecord models or mappings
        conditions: {"sea_surface_temp": float, "wave_height": float}
        context: Evaluation month; defaults to the current month

    Returns:
        {
            "evaluations": [{"species": {...}, "result": {"suitable", "reason"}}, ...],
            "suitable_count": int,
            "total": int,
            "sustainability_score": int,
            "sustainability_label": str,
            "alerts": [...]
        }
    """
    context = context or EvaluationContext.now()
    records = [as_record(s, i) for i, s in enumerate(species_list)]

    evaluations = [
        {"species": dict(record), "result": evaluate_suitability(record, conditions, context)}
        for record in records
    ]
    score = calculate_sustainability_score(records, conditions)
    alerts = generate_alerts(records, score, conditions)

    suitable_count = sum(1 for e in evaluations if e["result"]["suitable"])

    logger.info(f"Fishery overview: {suitable_count}/{len(records)} suitable, score={score}, month={context.month}")

    return {
        "evaluations": evaluations,
        "suitable_count": suitable_count,
        "total": len(records),
        "sustainability_score": score,
        "sustainability_label": sustainability_label(score),
        "alerts": alerts,
    }
