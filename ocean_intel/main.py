"""
FastAPI Application Entry Point

Main application with lifecycle management for the upstream HTTP client.
"""

import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ocean_intel import __version__
from ocean_intel.core.config import settings, is_production
from ocean_intel.core.logging import setup_logging, set_trace_id

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Closes the Open-Meteo client on shutdown.
    """
    logger.info("Ocean Intelligence Service starting up...")

    yield

    logger.info("Ocean Intelligence Service shutting down...")

    try:
        from ocean_intel.tools import open_meteo_client
        await open_meteo_client.aclose_client()
        logger.info("Closed Open-Meteo client")
    except Exception as e:
        logger.error(f"Error closing open_meteo_client: {e}")

    logger.info("Ocean Intelligence Service shutdown complete")


app = FastAPI(
    title="Ocean Intelligence Service",
    description="Ocean observation analytics and fisheries sustainability scoring",
    version=__version__,
    docs_url=None if is_production() else "/docs",
    redoc_url=None if is_production() else "/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def trace_id_middleware(request: Request, call_next):
    """Tag every log line of a request with its x-request-id (or a fresh one)."""
    set_trace_id(request.headers.get("x-request-id") or uuid.uuid4().hex[:8])
    return await call_next(request)


from ocean_intel.api.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "service": "Ocean Intelligence Service",
        "status": "running",
        "version": __version__
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "ocean_intel",
        "components": {
            "api": "ok",
            "engine": "ok"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
