"""
Central API Router

Aggregates all endpoint routers for the ocean intelligence service.
Handles missing routers gracefully to allow partial service operation.
"""

import importlib
import logging
from fastapi import APIRouter

logger = logging.getLogger(__name__)

# Main API router
api_router = APIRouter()

# Router configurations: (module_name, tags)
ROUTER_CONFIGS = [
    ("buoy", ["Observations"]),
    ("analytics", ["Analytics"]),
    ("fisheries", ["Fisheries"]),
]


def _include_router_safe(module_name: str, tags: list) -> None:
    """
    Import and include a router module.
    Logs a warning and skips the module when it cannot be imported.
    """
    try:
        module = importlib.import_module(f"ocean_intel.api.{module_name}")
        router = getattr(module, "router")
    except ImportError as e:
        logger.warning(f"⚠ Router module 'ocean_intel.api.{module_name}' could not be imported: {e} - skipping")
        return
    except AttributeError:
        logger.warning(f"⚠ Module 'ocean_intel.api.{module_name}' has no 'router' attribute - skipping")
        return

    api_router.include_router(router, tags=tags)
    logger.info(f"✓ Registered {module_name} router")


# Register all routers
for module_name, tags in ROUTER_CONFIGS:
    _include_router_safe(module_name, tags)

logger.info(f"API router initialized with {len(api_router.routes)} routes")
