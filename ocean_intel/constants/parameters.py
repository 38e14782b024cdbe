"""
Observation Parameter Constants

Parameter keys used in observation records, for both source shapes:

- Live feed rows (merged Open-Meteo hourly arrays) use descriptive keys.
- Archive rows keep the NDBC standard meteorological column names.

Both shapes carry a "timestamp" key; the engine only ever looks a value up
by the key it is given.
"""

from typing import Dict, FrozenSet, List

TIMESTAMP_KEY = "timestamp"

# ============================================================================
# Live feed parameters
# SYNC WITH: ocean_intel/tools/open_meteo_client.py merge_hourly()
# ============================================================================

SEA_SURFACE_TEMP = "sea_surface_temp"
WIND_SPEED = "wind_speed"
AIR_PRESSURE = "air_pressure"
WAVE_HEIGHT = "wave_height"

# Hourly variables requested upstream
MARINE_HOURLY_VARIABLES = ["wave_height", "wind_wave_height", "swell_wave_height", "sea_surface_temperature"]
MARINE_CURRENT_VARIABLES = ["wave_height", "wave_direction", "wave_period"]
WEATHER_HOURLY_VARIABLES = ["temperature_2m", "wind_speed_10m", "surface_pressure", "sea_surface_temperature"]


# ============================================================================
# Archive parameters (NDBC stdmet columns)
# SYNC WITH: ocean_intel/tools/archive_loader.py
# ============================================================================

WATER_TEMP = "WTMP"      # °C
ARCHIVE_WIND = "WSPD"    # m/s
ARCHIVE_WAVE = "WVHT"    # m
ARCHIVE_PRES = "PRES"    # hPa

ARCHIVE_PARAMETERS: List[str] = [WATER_TEMP, ARCHIVE_WIND, ARCHIVE_WAVE, ARCHIVE_PRES]

# Units shown next to each parameter
PARAMETER_UNITS: Dict[str, str] = {
    SEA_SURFACE_TEMP: "°C",
    WIND_SPEED: "km/h",
    AIR_PRESSURE: "hPa",
    WAVE_HEIGHT: "m",
    WATER_TEMP: "°C",
    ARCHIVE_WIND: "m/s",
    ARCHIVE_WAVE: "m",
    ARCHIVE_PRES: "hPa",
}

# NDBC writes 99 / 999 / 9999 (and their .0 forms) for missing readings
NDBC_MISSING_SENTINELS: FrozenSet[float] = frozenset({99.0, 999.0, 9999.0})

# Columns that may hold the year in NDBC exports
NDBC_YEAR_COLUMNS = ("#YY", "YY", "YYYY")
