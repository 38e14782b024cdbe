"""
Analytics Tests

Tests for the observation analytics and fisheries reporting:
- stats.compute_stats() / compute_series_stats()
- smoothing.compute_moving_average() / attach_moving_averages()
- alerts.generate_alerts()
- overview.evaluate_fishery()

Run: pytest ocean_intel/tests/test_analytics.py -v
"""

import pytest


def _series(values, key="WTMP"):
    return [{"timestamp": None, key: v} for v in values]


# ==================== Statistics Tests ====================

def test_stats_single_moderate_anomaly():
    """[10,10,10,10,50]: mean 18, std 16, z(50) = 2.0 is moderate."""
    from ocean_intel.analytics.stats import compute_stats

    stats = compute_stats(_series([10, 10, 10, 10, 50]), "WTMP")

    assert stats["mean"] == pytest.approx(18.0)
    assert stats["std_dev"] == pytest.approx(16.0)
    assert stats["min"] == 10
    assert stats["max"] == 50
    assert stats["count"] == 5
    assert stats["anomaly_count"] == 1
    assert stats["moderate_count"] == 1
    assert stats["extreme_count"] == 0


def test_stats_extreme_anomaly():
    """One spike among twenty flat readings is extreme."""
    from ocean_intel.analytics.stats import compute_stats

    stats = compute_stats(_series([0] * 20 + [100]), "WTMP")

    assert stats["extreme_count"] == 1
    assert stats["moderate_count"] == 0
    assert stats["anomaly_count"] == 1


def test_stats_no_valid_values_is_all_zero():
    """All-missing parameter reports zeros, not an error."""
    from ocean_intel.analytics.stats import compute_stats

    stats = compute_stats(_series([None, float("nan"), "n/a"]), "WTMP")

    assert stats == {
        "mean": 0.0,
        "std_dev": 0.0,
        "min": 0.0,
        "max": 0.0,
        "count": 0,
        "anomaly_count": 0,
        "moderate_count": 0,
        "extreme_count": 0,
    }
    assert compute_stats([], "WTMP")["count"] == 0


def test_stats_missing_values_excluded_zero_kept():
    """Missing values are skipped; zero is a real reading."""
    from ocean_intel.analytics.stats import compute_stats

    stats = compute_stats(_series([None, 0, "bad", float("nan"), 30]), "WTMP")

    assert stats["count"] == 2
    assert stats["mean"] == pytest.approx(15.0)
    assert stats["min"] == 0


def test_stats_constant_series_has_no_anomalies():
    from ocean_intel.analytics.stats import compute_stats

    stats = compute_stats(_series([5, 5, 5]), "WTMP")

    assert stats["std_dev"] == 0
    assert stats["anomaly_count"] == 0


@pytest.mark.parametrize("value,count", [(0.1, 3), (0.1, 7), (1.1, 3), (0.3, 3), (-2.7, 5), (28.45, 24)])
def test_stats_constant_float_series_is_exact(value, count):
    """Constant float readings give the reading itself as mean and zero spread."""
    from ocean_intel.analytics.stats import compute_stats

    stats = compute_stats(_series([value] * count), "WTMP")

    assert stats["mean"] == value
    assert stats["std_dev"] == 0.0
    assert stats["min"] <= stats["mean"] <= stats["max"]
    assert stats["anomaly_count"] == 0


@pytest.mark.parametrize("values", [
    [0.1, 0.1, 0.1, 0.2],
    [0.3, 0.1, 0.2],
    [1e-9, 1e-9, 2e-9],
    [28.4, 28.4000000001],
    [-0.1, -0.1, -0.1, 0.0],
    [1e16, 1.0, 1e16],
])
def test_stats_mean_within_sample_range(values):
    """min <= mean <= max holds for short mixed float series."""
    from ocean_intel.analytics.stats import compute_stats

    stats = compute_stats(_series(values), "WTMP")

    assert stats["min"] <= stats["mean"] <= stats["max"]
    assert stats["std_dev"] >= 0
    assert stats["count"] == len(values)


def test_stats_bounds_and_counts(hourly_series):
    """min <= mean <= max and counts are consistent."""
    from ocean_intel.analytics.stats import compute_stats

    for key in ("sea_surface_temp", "wave_height"):
        stats = compute_stats(hourly_series, key)
        assert stats["min"] <= stats["mean"] <= stats["max"]
        assert stats["std_dev"] >= 0
        assert stats["anomaly_count"] == stats["moderate_count"] + stats["extreme_count"]
        assert stats["anomaly_count"] <= stats["count"]

    assert compute_stats(hourly_series, "wave_height")["count"] == 44
    assert compute_stats(hourly_series, "sea_surface_temp")["extreme_count"] == 1


def test_series_stats_keeps_key_order(hourly_series):
    from ocean_intel.analytics.stats import compute_series_stats

    result = compute_series_stats(hourly_series, ["wave_height", "sea_surface_temp"])

    assert list(result) == ["wave_height", "sea_surface_temp"]


@pytest.mark.parametrize("z,band", [
    (0.0, "normal"),
    (1.99, "normal"),
    (2.0, "moderate"),
    (-2.5, "moderate"),
    (3.0, "extreme"),
    (-7.0, "extreme"),
])
def test_classify_z(z, band):
    from ocean_intel.analytics.stats import classify_z

    assert classify_z(z) == band


# ==================== Moving Average Tests ====================

def test_moving_average_basic_window():
    from ocean_intel.analytics.smoothing import compute_moving_average

    result = compute_moving_average(_series([1, 2, 3, 4, 5]), "WTMP", 3)

    assert result == pytest.approx([1.0, 1.5, 2.0, 3.0, 4.0])


def test_moving_average_gaps_stay_none():
    """An empty window is None; a window with one valid value averages it."""
    from ocean_intel.analytics.smoothing import compute_moving_average

    result = compute_moving_average(_series([None, 2, None, 4, None, None, None]), "WTMP", 2)

    assert result == [None, 2.0, 2.0, 4.0, 4.0, None, None]


def test_moving_average_zero_is_not_missing():
    from ocean_intel.analytics.smoothing import compute_moving_average

    assert compute_moving_average(_series([0, None]), "WTMP", 2) == [0.0, 0.0]


def test_moving_average_window_one_is_identity():
    from ocean_intel.analytics.smoothing import compute_moving_average

    values = [3.5, None, 1.0, 0.0]

    assert compute_moving_average(_series(values), "WTMP", 1) == [3.5, None, 1.0, 0.0]


def test_moving_average_length_and_idempotence(hourly_series):
    """Output length matches input and repeated calls agree."""
    from ocean_intel.analytics.smoothing import compute_moving_average

    first = compute_moving_average(hourly_series, "wave_height")
    second = compute_moving_average(hourly_series, "wave_height")

    assert len(first) == len(hourly_series)
    assert first == second
    assert all(v is not None for v in first)


@pytest.mark.parametrize("window", [0, -3, 2.5, True])
def test_moving_average_rejects_bad_window(window):
    from ocean_intel.analytics.smoothing import compute_moving_average
    from ocean_intel.core.errors import ValidationError

    with pytest.raises(ValidationError) as exc_info:
        compute_moving_average(_series([1, 2]), "WTMP", window)

    assert exc_info.value.details["field"] == "window_size"


def test_attach_moving_averages_copies_rows(hourly_series):
    from ocean_intel.analytics.smoothing import attach_moving_averages

    rows = attach_moving_averages(hourly_series, ["sea_surface_temp"], 6)

    assert len(rows) == len(hourly_series)
    assert "sea_surface_temp_ma" in rows[0]
    assert "sea_surface_temp_ma" not in hourly_series[0]
    assert rows[0]["sea_surface_temp_ma"] == pytest.approx(hourly_series[0]["sea_surface_temp"])


# ==================== Alert Tests ====================

def test_alerts_species_rules_in_list_order(species_list, calm_conditions):
    from ocean_intel.analytics.alerts import generate_alerts

    alerts = generate_alerts(species_list, 81, calm_conditions)

    assert [a["type"] for a in alerts] == ["warning", "warning", "info"]
    assert "Indian Mackerel" in alerts[0]["message"]
    assert "45%" in alerts[0]["message"]
    assert alerts[1]["message"] == "Biological Alert: Whale Shark stocks are under pressure (30%)."
    assert alerts[2]["message"] == "Conservation: Whale Shark is strictly protected in this area."


def test_alerts_rough_sea_and_low_score_first(open_species):
    from ocean_intel.analytics.alerts import generate_alerts

    alerts = generate_alerts([open_species], 50, {"sea_surface_temp": 25, "wave_height": 3.5})

    assert [a["type"] for a in alerts] == ["danger", "warning"]
    assert alerts[0]["message"].startswith("Rough Sea Warning")
    assert alerts[1]["message"].startswith("Low Sustainability Index")


def test_alerts_thresholds_are_strict(open_species):
    """Wave height of exactly 3 m and a score of exactly 60 do not alert."""
    from ocean_intel.analytics.alerts import generate_alerts

    species = {**open_species, "stock_health": 50}

    assert generate_alerts([species], 60, {"wave_height": 3.0}) == []


def test_alerts_empty_inputs(calm_conditions):
    from ocean_intel.analytics.alerts import generate_alerts

    assert generate_alerts([], 90, calm_conditions) == []


# ==================== Overview Tests ====================

def test_fishery_overview(species_list, calm_conditions, july):
    from ocean_intel.analytics.overview import evaluate_fishery

    overview = evaluate_fishery(species_list, calm_conditions, july)

    assert overview["total"] == 3
    assert overview["suitable_count"] == 1
    assert overview["sustainability_score"] == 81
    assert overview["sustainability_label"] == "Excellent"
    assert len(overview["alerts"]) == 3

    reasons = [e["result"]["reason"] for e in overview["evaluations"]]
    assert "season" in reasons[1].lower()
    assert "protected" in reasons[2].lower()


def test_fishery_overview_empty(calm_conditions, july):
    from ocean_intel.analytics.overview import evaluate_fishery

    overview = evaluate_fishery([], calm_conditions, july)

    assert overview["total"] == 0
    assert overview["sustainability_score"] == 0
    assert overview["sustainability_label"] == "Critical Warning"
    assert overview["alerts"] == [
        {"type": "warning", "message": "Low Sustainability Index: Recommendation to reduce fishing effort."}
    ]
