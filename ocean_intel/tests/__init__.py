"""
Tests Package

Test suite for the ocean intelligence service.

Modules:
- test_algorithms: Suitability, sustainability and risk framework scoring
- test_analytics: Statistics, moving averages, alerts and fishery overview
- test_tools: Open-Meteo client and archive/dataset loaders
- test_api: FastAPI endpoints

Run all tests:
    pytest ocean_intel/tests/

Run specific test file:
    pytest ocean_intel/tests/test_algorithms.py -v
"""
