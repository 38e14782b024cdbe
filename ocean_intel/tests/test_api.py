"""
API Tests

Tests for FastAPI endpoints using TestClient.
Upstream feeds are monkeypatched; datasets are written to tmp_path.

Run: pytest ocean_intel/tests/test_api.py -v
"""

import json
import threading

import pytest


STOCKS_CSV = (
    "id,region,species,stock_health_percent,trend,msy_tonnes,current_catch_tonnes,protected\n"
    "1,Arabian Sea,Sardine,80,Stable,100,100,false\n"
    "2,Arabian Sea,Mackerel,80,Stable,100,100,false\n"
    "3,Bay of Bengal,Hilsa,80,Stable,100,100,false\n"
)

ARCHIVE_CSV = (
    "#YY,MM,DD,hh,mm,WTMP,WSPD,WVHT,PRES\n"
    "#yr,mo,dy,hr,mn,degC,m/s,m,hPa\n"
    "2012,01,01,00,00,14.0,5.0,1.0,1015.0\n"
    "2012,01,01,01,00,16.0,5.0,99.00,1015.0\n"
    "2013,01,01,00,00,15.0,4.0,2.0,1012.0\n"
)


# ==================== Test Client Fixture ====================

@pytest.fixture
def client():
    """Create FastAPI TestClient."""
    try:
        from fastapi.testclient import TestClient
        from ocean_intel.main import app
        return TestClient(app)
    except ImportError as e:
        pytest.skip(f"Cannot import ocean_intel.main: {e}")


@pytest.fixture
def data_dir(tmp_path, monkeypatch, species_list):
    """Point DATA_DIR at a temp directory holding every dataset."""
    (tmp_path / "stocks.csv").write_text(STOCKS_CSV)
    (tmp_path / "archive.csv").write_text(ARCHIVE_CSV)
    (tmp_path / "species.json").write_text(json.dumps(species_list))
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOCKS_FILE", "stocks.csv")
    monkeypatch.setenv("ARCHIVE_FILE", "archive.csv")
    monkeypatch.setenv("SPECIES_FILE", "species.json")
    return tmp_path


@pytest.fixture
def live_sst(monkeypatch):
    """Replace the live SST signal with a fixed reading."""
    from ocean_intel.tools import open_meteo_client

    async def fake_signal(lat=None, lon=None):
        return {"sst": 27.0, "data_quality": "real"}

    monkeypatch.setattr(open_meteo_client, "fetch_climate_signal", fake_signal)


# ==================== Health and Root Endpoints ====================

def test_root_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "running"
    assert "service" in data


def test_health_endpoint(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# ==================== Analytics Endpoints ====================

def test_stats_endpoint(client):
    from ocean_intel.schemas import ApiResponse, ParameterStats

    series = [{"timestamp": "2012-01-01T00:00", "WTMP": v} for v in (10, 10, 10, 10, 50)]
    series.append({"timestamp": "2012-01-01T05:00", "WTMP": None})

    response = client.post(
        "/api/analytics/stats",
        json={"series": series, "parameter_keys": ["WTMP", "WVHT"]},
        headers={"x-request-id": "req-123"}
    )

    assert response.status_code == 200
    body = response.json()
    ApiResponse.model_validate(body)
    assert body["status"] == "success"
    assert body["request_id"] == "req-123"
    assert body["data"]["rows"] == 6

    wtmp = body["data"]["stats"]["WTMP"]
    assert wtmp["mean"] == pytest.approx(18.0)
    assert wtmp["std_dev"] == pytest.approx(16.0)
    assert wtmp["moderate_count"] == 1
    ParameterStats.model_validate(wtmp)
    assert body["data"]["stats"]["WVHT"]["count"] == 0


def test_stats_endpoint_requires_parameter_keys(client):
    response = client.post("/api/analytics/stats", json={"series": [], "parameter_keys": []})

    assert response.status_code == 422


def test_moving_average_endpoint(client):
    series = [{"wave_height": v} for v in (1.0, None, 3.0)]

    response = client.post(
        "/api/analytics/moving-average",
        json={"series": series, "parameter_key": "wave_height", "window_size": 2}
    )

    assert response.status_code == 200
    assert response.json()["data"]["values"] == [1.0, 1.0, 3.0]


def test_moving_average_endpoint_rejects_zero_window(client):
    response = client.post(
        "/api/analytics/moving-average",
        json={"series": [], "parameter_key": "wave_height", "window_size": 0}
    )

    assert response.status_code == 422


# ==================== Fisheries Endpoints ====================

def test_overview_endpoint(client, species_list, calm_conditions):
    from ocean_intel.schemas import FisheryOverview

    response = client.post(
        "/api/fisheries/overview",
        json={"species": species_list, "conditions": calm_conditions, "month": 7}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    FisheryOverview.model_validate(data)
    assert data["suitable_count"] == 1
    assert data["total"] == 3
    assert data["sustainability_score"] == 81
    assert len(data["alerts"]) == 3


def test_overview_endpoint_rejects_bad_month(client, species_list, calm_conditions):
    response = client.post(
        "/api/fisheries/overview",
        json={"species": species_list, "conditions": calm_conditions, "month": 13}
    )

    assert response.status_code == 422


def test_risk_endpoint(client, stock_records):
    from ocean_intel.schemas import RiskResult

    response = client.post("/api/fisheries/risk", json={"stocks": stock_records, "sst": 27})

    assert response.status_code == 200
    data = response.json()["data"]
    RiskResult.model_validate(data)
    assert data["sustainability_index"] == 61
    assert data["collapse_risk"]["score"] == 46
    assert data["projection"]["index_6_month"] == 59


def test_risk_endpoint_no_match(client, stock_records):
    response = client.post(
        "/api/fisheries/risk",
        json={"stocks": stock_records, "sst": 27, "region": "Red Sea"}
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"count": 0}


def test_fisheries_dataset_endpoint(client, data_dir, live_sst):
    response = client.get("/api/fisheries", params={"region": "arabian sea"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["stats"]["count"] == 2
    assert data["climate_stress"]["score"] == 40
    assert data["climate_stress"]["data_quality"] == "real"
    assert data["sustainability_index"] == 61


def test_fisheries_dataset_missing_file(client, tmp_path, monkeypatch, live_sst):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "nowhere"))

    response = client.get("/api/fisheries")

    assert response.status_code == 404


# ==================== Buoy Endpoints ====================

def test_buoy_endpoint(client, monkeypatch):
    from ocean_intel.tools import open_meteo_client

    async def fake_fetch(lat, lon):
        return {"lat": lat, "lon": lon, "data": [{"timestamp": "2026-02-05T00:00", "wave_height": 1.1}]}

    monkeypatch.setattr(open_meteo_client, "fetch_marine_observations", fake_fetch)

    response = client.get("/api/buoy", params={"lat": 15.5, "lon": 73.8})

    assert response.status_code == 200
    assert response.json()["data"][0]["wave_height"] == 1.1


def test_buoy_endpoint_upstream_failure(client, monkeypatch):
    from ocean_intel.core.errors import UpstreamError
    from ocean_intel.schemas import ErrorResponse
    from ocean_intel.tools import open_meteo_client

    async def failing_fetch(lat, lon):
        raise UpstreamError("Failed to fetch live data: HTTP 503")

    monkeypatch.setattr(open_meteo_client, "fetch_marine_observations", failing_fetch)

    response = client.get("/api/buoy", params={"lat": 0, "lon": 0})

    assert response.status_code == 502
    detail = ErrorResponse.model_validate(response.json()["detail"])
    assert detail.code == "upstream_error"


def test_buoy_historical_year(client, data_dir):
    response = client.get("/api/buoy-historical", params={"year": 2012, "moving_average": True, "window_size": 2})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["year"] == 2012
    assert data["count"] == 2
    assert data["stats"]["WTMP"]["mean"] == pytest.approx(15.0)
    assert data["stats"]["WVHT"]["count"] == 1
    assert data["rows"][1]["WVHT"] is None
    assert data["rows"][1]["WTMP_ma"] == pytest.approx(15.0)


def test_buoy_historical_all_years(client, data_dir):
    response = client.get("/api/buoy-historical")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["count"] == 3
    assert "WTMP_ma" not in data["rows"][0]
    assert data["units"]["WTMP"] == "°C"


def test_buoy_historical_runs_off_event_loop():
    """The archive route is a plain function so pandas reads happen in the threadpool."""
    import inspect
    from ocean_intel.api.buoy import get_buoy_historical

    assert not inspect.iscoroutinefunction(get_buoy_historical)


# ==================== Dataset-backed Fisheries ====================

def test_overview_defaults_to_species_dataset(client, data_dir, calm_conditions):
    response = client.post(
        "/api/fisheries/overview",
        json={"conditions": calm_conditions, "month": 7}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 3
    assert data["suitable_count"] == 1
    assert data["sustainability_score"] == 81


def test_overview_missing_species_dataset(client, tmp_path, monkeypatch, calm_conditions):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "nowhere"))

    response = client.post("/api/fisheries/overview", json={"conditions": calm_conditions})

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "not_found"


def test_fisheries_dataset_loaded_off_event_loop(client, data_dir, monkeypatch):
    """Stock CSV parsing runs on a worker thread, not the loop thread."""
    from ocean_intel.tools import archive_loader, open_meteo_client

    threads = {}
    real_loader = archive_loader.load_stock_records

    def recording_loader(path):
        threads["loader"] = threading.get_ident()
        return real_loader(path)

    async def recording_signal(lat=None, lon=None):
        threads["loop"] = threading.get_ident()
        return {"sst": 27.0, "data_quality": "fallback"}

    monkeypatch.setattr(archive_loader, "load_stock_records", recording_loader)
    monkeypatch.setattr(open_meteo_client, "fetch_climate_signal", recording_signal)

    response = client.get("/api/fisheries")

    assert response.status_code == 200
    assert response.json()["data"]["climate_stress"]["data_quality"] == "fallback"
    assert threads["loader"] != threads["loop"]


# ==================== Error Envelope ====================

def test_unexpected_failure_maps_to_internal_error(client, monkeypatch):
    from ocean_intel.api import analytics as analytics_api

    def broken(series, keys):
        raise RuntimeError("boom")

    monkeypatch.setattr(analytics_api, "compute_series_stats", broken)

    response = client.post(
        "/api/analytics/stats",
        json={"series": [{"WTMP": 1.0}], "parameter_keys": ["WTMP"]},
        headers={"x-request-id": "trace-500"}
    )

    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail["code"] == "internal_error"
    assert detail["message"] == "Failed to compute statistics"
    assert detail["trace_id"] == "trace-500"
    assert "details" not in detail


def test_error_dict_includes_details():
    from ocean_intel.core.errors import ValidationError

    error = ValidationError("Missing field 'sst'", details={"field": "sst"})

    assert error.to_dict(trace_id="abc") == {
        "code": "validation_error",
        "message": "Missing field 'sst'",
        "details": {"field": "sst"},
        "trace_id": "abc",
    }
