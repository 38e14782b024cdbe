"""
Core Configuration Module

Centralizes environment configuration for the ocean intelligence service.
Provides a singleton Settings object with defaults for the upstream
Open-Meteo feeds and the local archive/reference datasets.

Scoring weights and thresholds are deliberately NOT here: they are fixed
constants in ocean_intel.constants.thresholds.

Usage:
    from ocean_intel.core.config import settings

    print(settings.APP_ENV)
    print(settings.MARINE_API_URL)
"""

import os
from pathlib import Path
from typing import List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    Every property re-reads the environment, so tests can monkeypatch
    variables without rebuilding the singleton.
    """

    # ==================== Application Settings ====================

    @property
    def APP_ENV(self) -> str:
        """Application environment: dev, staging, production"""
        return os.getenv("APP_ENV", "dev")

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""
        return os.getenv("LOG_LEVEL", "INFO")

    # ==================== Upstream Feeds ====================

    @property
    def MARINE_API_URL(self) -> str:
        """Open-Meteo marine endpoint (wave height, SST)"""
        return os.getenv("MARINE_API_URL", "https://marine-api.open-meteo.com/v1/marine")

    @property
    def WEATHER_API_URL(self) -> str:
        """Open-Meteo forecast endpoint (wind, pressure, SST fallback)"""
        return os.getenv("WEATHER_API_URL", "https://api.open-meteo.com/v1/forecast")

    @property
    def FORECAST_PAST_DAYS(self) -> int:
        """Days of history requested from the live feed"""
        return int(os.getenv("FORECAST_PAST_DAYS", "2"))

    @property
    def FORECAST_DAYS(self) -> int:
        """Days of forecast requested from the live feed"""
        return int(os.getenv("FORECAST_DAYS", "3"))

    @property
    def CLIMATE_SIGNAL_LAT(self) -> float:
        """Latitude sampled for the regional climate-stress SST signal"""
        return float(os.getenv("CLIMATE_SIGNAL_LAT", "-2"))

    @property
    def CLIMATE_SIGNAL_LON(self) -> float:
        """Longitude sampled for the regional climate-stress SST signal"""
        return float(os.getenv("CLIMATE_SIGNAL_LON", "81"))

    @property
    def DEFAULT_SST(self) -> float:
        """SST (°C) used when the live climate signal cannot be fetched"""
        return float(os.getenv("DEFAULT_SST", "28.5"))

    # ==================== HTTP Client Settings ====================

    @property
    def OPEN_METEO_TIMEOUT(self) -> float:
        """Open-Meteo client timeout in seconds"""
        return float(os.getenv("OPEN_METEO_TIMEOUT", "10.0"))

    @property
    def OPEN_METEO_MAX_CONNECTIONS(self) -> int:
        """Maximum HTTP connections in pool"""
        return int(os.getenv("OPEN_METEO_MAX_CONNECTIONS", "20"))

    @property
    def OPEN_METEO_MAX_KEEPALIVE(self) -> int:
        """Maximum keepalive connections in pool"""
        return int(os.getenv("OPEN_METEO_MAX_KEEPALIVE", "5"))

    # ==================== Datasets ====================

    @property
    def DATA_DIR(self) -> Path:
        """Directory holding the archive CSV and reference datasets"""
        return Path(os.getenv("DATA_DIR", "./data"))

    @property
    def ARCHIVE_FILE(self) -> str:
        """Historical buoy archive (NDBC standard meteorological columns)"""
        return os.getenv("ARCHIVE_FILE", "46042_master_2012_2023.csv")

    @property
    def STOCKS_FILE(self) -> str:
        """Regional stock assessment records"""
        return os.getenv("STOCKS_FILE", "fisheries_indian_region_2023.csv")

    @property
    def SPECIES_FILE(self) -> str:
        """Species constraint reference dataset"""
        return os.getenv("SPECIES_FILE", "species.json")

    @property
    def MAX_RENDER_ROWS(self) -> int:
        """Maximum archive rows returned per year (most recent kept)"""
        return int(os.getenv("MAX_RENDER_ROWS", "5000"))

    # ==================== CORS Settings ====================

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Allowed CORS origins"""
        origins_str = os.getenv("CORS_ORIGINS", "*")
        if origins_str == "*":
            return ["*"]
        return [origin.strip() for origin in origins_str.split(",")]

    def data_path(self, filename: str) -> Path:
        """Resolve a dataset filename against DATA_DIR."""
        return self.DATA_DIR / filename


# ==================== Singleton Instance ====================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Returns:
        Settings object with configuration values

    Example:
        >>> from ocean_intel.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.APP_ENV)
        'dev'
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


# Convenience singleton for direct import
settings = get_settings()


# ==================== Helper Functions ====================

def is_production() -> bool:
    """
    Check if the application is running in production environment.

    Returns:
        True if APP_ENV is 'production' or 'prod'
    """
    env = settings.APP_ENV.lower()
    return env in ("production", "prod")

