"""
Fisheries API Router

REST API endpoints for species and stock scoring:
- POST /fisheries/overview: Suitability, sustainability score and alerts for a species list (or the species dataset)
- POST /fisheries/risk: Risk framework over supplied stock records
- GET /fisheries: Risk framework over the stock dataset with the live SST signal

All scores are recomputed per request; nothing is persisted.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Header, Query, Body
from fastapi.concurrency import run_in_threadpool

from ocean_intel.algorithms.risk_framework import score_risk
from ocean_intel.algorithms.suitability import EvaluationContext
from ocean_intel.analytics.overview import evaluate_fishery
from ocean_intel.core.config import settings
from ocean_intel.core.errors import AppError, InternalError, to_http_exception
from ocean_intel.core.logging import set_trace_id
from ocean_intel.schemas.fisheries import OverviewRequest
from ocean_intel.schemas.risk import RiskRequest
from ocean_intel.tools import archive_loader, open_meteo_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/fisheries/overview")
async def post_overview(
    request: OverviewRequest = Body(...),
    x_request_id: Optional[str] = Header(None, alias="x-request-id")
):
    """
    Evaluate a species list against the current conditions.

    Returns per-species suitability, suitable count, sustainability score
    and label, and alerts.
    When no species list is supplied the species dataset is used.
    """
    set_trace_id(x_request_id or "api-direct")
    context = EvaluationContext(month=request.month) if request.month else EvaluationContext.now()

    try:
        species = request.species
        if species is None:
            species = await run_in_threadpool(
                archive_loader.load_species, settings.data_path(settings.SPECIES_FILE)
            )
        overview = evaluate_fishery(species, request.conditions, context)
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"Fishery overview failed: {e}")
        raise to_http_exception(InternalError("Failed to evaluate fishery"))

    return {
        "status": "success",
        "data": overview,
        "request_id": x_request_id
    }


@router.post("/fisheries/risk")
async def post_risk(
    request: RiskRequest = Body(...),
    x_request_id: Optional[str] = Header(None, alias="x-request-id")
):
    """
    Score supplied stock records against an SST signal.

    Returns {"count": 0} as data when no record matches the region.
    """
    set_trace_id(x_request_id or "api-direct")

    try:
        result = score_risk(request.stocks, request.sst, region=request.region)
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"Risk scoring failed: {e}")
        raise to_http_exception(InternalError("Failed to score risk"))

    return {
        "status": "success",
        "data": result,
        "request_id": x_request_id
    }


@router.get("/fisheries")
async def get_fisheries(
    region: Optional[str] = Query(None, description="Region filter (case-insensitive)"),
    x_request_id: Optional[str] = Header(None, alias="x-request-id")
):
    """
    Risk framework over the stock dataset.

    The climate signal is the mean live SST at the configured point; the
    configured default SST is used when the feed is unavailable.
    """
    set_trace_id(x_request_id or "api-direct")

    try:
        stocks = await run_in_threadpool(
            archive_loader.load_stock_records, settings.data_path(settings.STOCKS_FILE)
        )
        signal = await open_meteo_client.fetch_climate_signal()
        result = score_risk(stocks, signal["sst"], region=region)
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"Fisheries risk framework failed: {e}")
        raise to_http_exception(InternalError("Failed to compute fisheries risk"))

    if result.get("count") != 0:
        result["climate_stress"]["data_quality"] = signal["data_quality"]

    return {
        "status": "success",
        "data": result,
        "request_id": x_request_id
    }
