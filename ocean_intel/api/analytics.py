"""
Analytics API Router

REST API endpoints for time-series analytics:
- POST /analytics/stats: Per-parameter statistics with anomaly counts
- POST /analytics/moving-average: Trailing moving average for one parameter

Series are supplied in the request body; nothing is stored.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Header, Body

from ocean_intel.analytics.smoothing import compute_moving_average
from ocean_intel.analytics.stats import compute_series_stats
from ocean_intel.core.errors import AppError, InternalError, to_http_exception
from ocean_intel.core.logging import set_trace_id
from ocean_intel.schemas.observations import MovingAverageRequest, StatsRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analytics/stats")
async def post_stats(
    request: StatsRequest = Body(...),
    x_request_id: Optional[str] = Header(None, alias="x-request-id")
):
    """
    Compute statistics for each requested parameter.

    Returns mean, population std-dev, min, max, valid count and
    moderate/extreme anomaly counts per parameter.
    """
    set_trace_id(x_request_id or "api-direct")
    rows = [obs.model_dump() for obs in request.series]

    try:
        stats = compute_series_stats(rows, request.parameter_keys)
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"Stats computation failed: {e}")
        raise to_http_exception(InternalError("Failed to compute statistics"))

    return {
        "status": "success",
        "data": {"rows": len(rows), "stats": stats},
        "request_id": x_request_id
    }


@router.post("/analytics/moving-average")
async def post_moving_average(
    request: MovingAverageRequest = Body(...),
    x_request_id: Optional[str] = Header(None, alias="x-request-id")
):
    """
    Compute the trailing moving average of one parameter.

    The result has one value per input row; null marks an empty window.
    """
    set_trace_id(x_request_id or "api-direct")
    rows = [obs.model_dump() for obs in request.series]

    try:
        values = compute_moving_average(rows, request.parameter_key, request.window_size)
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"Moving average computation failed: {e}")
        raise to_http_exception(InternalError("Failed to compute moving average"))

    return {
        "status": "success",
        "data": {
            "parameter_key": request.parameter_key,
            "window_size": request.window_size,
            "values": values
        },
        "request_id": x_request_id
    }
