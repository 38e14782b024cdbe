"""
API Package - FastAPI Routers

Routers are registered through ocean_intel.api.router.api_router.
"""

from ocean_intel.api.router import api_router

# API Version
API_VERSION = "1.0.0"

__all__ = [
    "api_router",
    "API_VERSION",
]
