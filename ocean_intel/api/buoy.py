"""
Buoy API Router

REST API endpoints serving observation series:
- GET /buoy: Live hourly series for a location (Open-Meteo marine + weather)
- GET /buoy-historical: Archive series for one year, with stats and optional trend lines
"""

import logging
from typing import Optional
from fastapi import APIRouter, Header, Query

from ocean_intel.analytics.smoothing import attach_moving_averages
from ocean_intel.analytics.stats import compute_series_stats
from ocean_intel.constants.parameters import ARCHIVE_PARAMETERS, PARAMETER_UNITS
from ocean_intel.constants.thresholds import DEFAULT_MA_WINDOW
from ocean_intel.core.config import settings
from ocean_intel.core.errors import AppError, InternalError, to_http_exception
from ocean_intel.core.logging import set_trace_id
from ocean_intel.tools import archive_loader, open_meteo_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/buoy")
async def get_buoy(
    lat: float = Query(..., description="Latitude"),
    lon: float = Query(..., description="Longitude"),
    x_request_id: Optional[str] = Header(None, alias="x-request-id")
):
    """
    Live hourly observations for a location.

    Returns {"lat", "lon", "data": [rows]}; 502 when the upstream feed fails.
    """
    set_trace_id(x_request_id or "api-direct")

    try:
        return await open_meteo_client.fetch_marine_observations(lat, lon)
    except AppError as e:
        raise to_http_exception(e)


@router.get("/buoy-historical")
def get_buoy_historical(
    year: Optional[int] = Query(None, description="Calendar year filter"),
    moving_average: bool = Query(False, description="Attach <key>_ma trend columns"),
    window_size: int = Query(DEFAULT_MA_WINDOW, ge=1, description="Trend window (samples)"),
    x_request_id: Optional[str] = Header(None, alias="x-request-id")
):
    """
    Historical archive rows, optionally for one year.

    A year filter keeps at most MAX_RENDER_ROWS of the most recent rows.
    Stats are computed over the returned rows.
    Plain def: FastAPI runs it in the threadpool while pandas reads the archive.
    """
    set_trace_id(x_request_id or "api-direct")

    try:
        series = archive_loader.load_archive(settings.data_path(settings.ARCHIVE_FILE))
        if year is not None:
            series = archive_loader.filter_year(series, year, settings.MAX_RENDER_ROWS)

        stats = compute_series_stats(series, ARCHIVE_PARAMETERS)
        rows = attach_moving_averages(series, ARCHIVE_PARAMETERS, window_size) if moving_average else series
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"Archive read failed: {e}")
        raise to_http_exception(InternalError("Failed to read historical data"))

    return {
        "status": "success",
        "data": {
            "year": year,
            "count": len(rows),
            "units": {key: PARAMETER_UNITS[key] for key in ARCHIVE_PARAMETERS},
            "stats": stats,
            "rows": rows
        },
        "request_id": x_request_id
    }
