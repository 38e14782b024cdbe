"""
Open-Meteo Live Feed Client

Fetches hourly marine and atmospheric arrays from Open-Meteo and merges
them into observation rows the analytics engine can consume.

Functions:
- merge_hourly: Merge weather + marine hourly payloads into observation rows
- fetch_marine_observations: Live observation series for a location
- fetch_climate_signal: Mean live SST for the climate-stress term
- aclose_client: Close HTTP client (call during shutdown)

Uses a module-level singleton AsyncClient for connection pooling.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from ocean_intel.constants.parameters import (
    AIR_PRESSURE,
    MARINE_CURRENT_VARIABLES,
    MARINE_HOURLY_VARIABLES,
    SEA_SURFACE_TEMP,
    TIMESTAMP_KEY,
    WAVE_HEIGHT,
    WEATHER_HOURLY_VARIABLES,
    WIND_SPEED,
)
from ocean_intel.core.config import settings
from ocean_intel.core.errors import UpstreamError
from ocean_intel.core.records import to_number
from ocean_intel.tools.time_tool import parse_iso_datetime

logger = logging.getLogger(__name__)


# ============================================================================
# Module-level HTTP Client
# ============================================================================

_client: Optional[httpx.AsyncClient] = None


def get_client() -> httpx.AsyncClient:
    """Get or create module-level httpx.AsyncClient singleton."""
    global _client

    if _client is None or _client.is_closed:
        limits = httpx.Limits(
            max_connections=settings.OPEN_METEO_MAX_CONNECTIONS,
            max_keepalive_connections=settings.OPEN_METEO_MAX_KEEPALIVE
        )

        _client = httpx.AsyncClient(
            timeout=settings.OPEN_METEO_TIMEOUT,
            limits=limits,
            follow_redirects=False
        )
        logger.info("Initialized Open-Meteo httpx.AsyncClient")

    return _client


async def aclose_client() -> None:
    """Close module-level httpx.AsyncClient gracefully."""
    global _client

    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.info("Closed Open-Meteo httpx.AsyncClient")
        _client = None


# ============================================================================
# Merge
# ============================================================================

def _at(values: Optional[Sequence[Any]], index: int) -> Any:
    if not values or index >= len(values):
        return None
    return values[index]


def _first_present(*candidates: Any) -> Any:
    for value in candidates:
        if value is not None:
            return value
    return None


def merge_hourly(weather: Dict[str, Any], marine: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Merge Open-Meteo weather and marine payloads into observation rows.

    The weather time axis drives the rows. SST prefers the marine feed and
    falls back to the weather feed. Absent or null values stay None.

    Args:
        weather: Forecast API JSON ({"hourly": {"time": [...], ...}})
        marine: Marine API JSON ({"hourly": {...}})

    Returns:
        [{"timestamp": datetime, "sea_surface_temp", "wind_speed",
          "air_pressure", "wave_height"}, ...]
    """
    weather_hourly = (weather or {}).get("hourly") or {}
    marine_hourly = (marine or {}).get("hourly") or {}

    rows = []
    for i, stamp in enumerate(weather_hourly.get("time") or []):
        rows.append({
            TIMESTAMP_KEY: parse_iso_datetime(stamp),
            SEA_SURFACE_TEMP: to_number(_first_present(
                _at(marine_hourly.get("sea_surface_temperature"), i),
                _at(weather_hourly.get("sea_surface_temperature"), i),
            )),
            WIND_SPEED: to_number(_at(weather_hourly.get("wind_speed_10m"), i)),
            AIR_PRESSURE: to_number(_at(weather_hourly.get("surface_pressure"), i)),
            WAVE_HEIGHT: to_number(_at(marine_hourly.get("wave_height"), i)),
        })

    return rows


# ============================================================================
# Fetch Functions
# ============================================================================

async def _get_json(url: str, params: Dict[str, Any]) -> Dict[str, Any]:
    client = get_client()
    try:
        response = await client.get(url, params=params)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"Open-Meteo returned {e.response.status_code} for {url}")
        raise UpstreamError(
            f"Failed to fetch live data: HTTP {e.response.status_code}",
            details={"url": url, "status_code": e.response.status_code}
        )
    except (httpx.RequestError, ValueError) as e:
        logger.error(f"Open-Meteo request to {url} failed: {e}")
        raise UpstreamError(f"Failed to fetch live data: {e}", details={"url": url})


async def fetch_marine_observations(lat: float, lon: float) -> Dict[str, Any]:
    """
    Fetch and merge the live hourly series for a location.

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        {"lat": float, "lon": float, "data": [observation rows]}

    Raises:
        UpstreamError: if either upstream request fails
    """
    common = {
        "latitude": lat,
        "longitude": lon,
        "past_days": settings.FORECAST_PAST_DAYS,
        "forecast_days": settings.FORECAST_DAYS,
        "timezone": "auto",
    }

    marine = await _get_json(settings.MARINE_API_URL, {
        **common,
        "hourly": ",".join(MARINE_HOURLY_VARIABLES),
        "current": ",".join(MARINE_CURRENT_VARIABLES),
    })
    weather = await _get_json(settings.WEATHER_API_URL, {
        **common,
        "hourly": ",".join(WEATHER_HOURLY_VARIABLES),
    })

    rows = merge_hourly(weather, marine)
    logger.info(f"Fetched {len(rows)} live observations for ({lat}, {lon})")

    return {"lat": lat, "lon": lon, "data": rows}


def mean_sst(marine: Dict[str, Any]) -> Optional[float]:
    """
    Mean of the valid hourly SST values in a marine payload.

    Returns:
        float, or None when the payload holds no valid SST
    """
    hourly = (marine or {}).get("hourly") or {}
    values = [v for v in (to_number(x) for x in hourly.get("sea_surface_temperature") or []) if v is not None]
    if not values:
        return None
    return sum(values) / len(values)


async def fetch_climate_signal(lat: Optional[float] = None, lon: Optional[float] = None) -> Dict[str, Any]:
    """
    Regional SST signal for the climate-stress term.

    Falls back to settings.DEFAULT_SST when the feed fails or returns no
    valid SST.

    Returns:
        {"sst": float, "data_quality": "real|fallback"}
    """
    lat = settings.CLIMATE_SIGNAL_LAT if lat is None else lat
    lon = settings.CLIMATE_SIGNAL_LON if lon is None else lon

    try:
        marine = await _get_json(settings.MARINE_API_URL, {
            "latitude": lat,
            "longitude": lon,
            "hourly": "sea_surface_temperature",
            "past_days": 1,
            "forecast_days": 1,
        })
    except UpstreamError as e:
        logger.warning(f"SST fetch failed, using default climate signal: {e.message}")
        return {"sst": settings.DEFAULT_SST, "data_quality": "fallback"}

    sst = mean_sst(marine)
    if sst is None:
        logger.warning("Marine feed returned no valid SST, using default climate signal")
        return {"sst": settings.DEFAULT_SST, "data_quality": "fallback"}

    return {"sst": sst, "data_quality": "real"}
