"""
Tools Package

Ingestion collaborators that feed the analytics engine.

Service Clients (with connection pooling and graceful shutdown):
- open_meteo_client: Live marine/weather feed merged into observation rows

Loaders and Utilities:
- archive_loader: Historical archive CSV and reference datasets (pandas)
- time_tool: Date/time parsing for observation timestamps

NOTE: Clients are NOT imported eagerly to avoid connection side effects at module import.
Import specific clients as needed: `from ocean_intel.tools import open_meteo_client`
"""

# Export utility tools (no connection side effects)
from ocean_intel.tools import time_tool

__all__ = [
    "time_tool",

    # Import as needed - not eagerly loaded
    # "open_meteo_client",
    # "archive_loader",
]
