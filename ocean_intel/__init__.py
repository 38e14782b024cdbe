"""
Ocean Intelligence Service

Analytics and scoring engine for oceanographic time series and regulated
fish stocks, with a thin FastAPI surface.
"""

__version__ = "1.0.0"
