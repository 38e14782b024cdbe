
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add the project root to sys.path so that "ocean_intel" can be found
# without an editable install.
# structure: <root>/ocean_intel/tests/conftest.py

current_dir = Path(__file__).parent.absolute()
root_dir = current_dir.parent.parent
sys.path.insert(0, str(root_dir))


# ==================== Shared Fixtures ====================

@pytest.fixture
def july():
    """Evaluation context pinned to July."""
    from ocean_intel.algorithms.suitability import EvaluationContext
    return EvaluationContext(month=7)


@pytest.fixture
def open_species():
    """Open, all-season species with a 20-28°C band and 2.5 m wave limit."""
    return {
        "id": 1,
        "name": "Yellowfin Tuna",
        "temp_range": [20, 28],
        "max_wave_height": 2.5,
        "season_months": list(range(1, 13)),
        "legal_status": "Open",
        "stock_health": 80,
        "trend": "Stable",
    }


@pytest.fixture
def species_list(open_species):
    """Mixed species list covering each legal status."""
    return [
        open_species,
        {
            "id": 2,
            "name": "Indian Mackerel",
            "temp_range": [24, 30],
            "max_wave_height": 3.5,
            "season_months": [1, 2, 3, 10, 11, 12],
            "legal_status": "Restricted",
            "stock_health": 45,
            "trend": "Declining",
        },
        {
            "id": 3,
            "name": "Whale Shark",
            "temp_range": [21, 30],
            "max_wave_height": 4.0,
            "season_months": list(range(1, 13)),
            "legal_status": "Protected",
            "stock_health": 30,
            "trend": "Critical",
        },
    ]


@pytest.fixture
def calm_conditions():
    return {"sea_surface_temp": 25.0, "wave_height": 1.0}


@pytest.fixture
def stock_records():
    """Stock records at full MSY utilization, stable, 80% health."""
    return [
        {
            "id": i,
            "region": "Arabian Sea" if i % 2 else "Bay of Bengal",
            "species": f"Stock {i}",
            "stock_health_percent": 80,
            "trend": "Stable",
            "msy_tonnes": 100,
            "current_catch_tonnes": 100,
            "protected": False,
        }
        for i in range(1, 5)
    ]


@pytest.fixture
def hourly_series():
    """48 hourly rows with a gap in wave_height and one SST spike."""
    start = datetime(2023, 7, 1, 0, 0)
    rows = []
    for i in range(48):
        rows.append({
            "timestamp": start + timedelta(hours=i),
            "sea_surface_temp": 40.0 if i == 30 else 25.0 + (i % 3) * 0.1,
            "wave_height": None if 10 <= i < 14 else 1.0 + (i % 4) * 0.25,
        })
    return rows
