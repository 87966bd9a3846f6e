import datetime as dt
import math
import random

import pytest

from weather_risk.activities import ACTIVITY_PROFILES
from weather_risk.domain import (
    ActivityTag,
    ConditionCode,
    HazardRecord,
    Observation,
    ReportMode,
    RiskScores,
)
from weather_risk.exceptions import InvalidObservation
from weather_risk.report_service import build_report_from_baseline, build_report_from_observation

NOW = dt.datetime(2025, 8, 1, 9, 30, tzinfo=dt.timezone.utc)
LAT_500_KM = math.degrees(500 / 6371.0)
CATALOG = [
    HazardRecord(id="header", category="category", lat="lat", lon="lon"),
    HazardRecord(id="storm-1", category="hurricane", lat=LAT_500_KM, lon=0.0, pressure_hpa=930, date="2019-09-01"),
]


def test_live_report_end_to_end():
    raw = {"main": "Clear", "description": "clear sky", "temperature": 42, "humidity": 50, "windSpeed": 5}
    report = build_report_from_observation(
        raw, {"lat": 0.0, "lon": 0.0}, "walking", CATALOG,
        report_date=dt.date(2025, 8, 2), now=NOW,
    )

    assert report.mode == ReportMode.LIVE
    assert report.activity == ActivityTag.WALKING
    assert report.activity_fallback is False
    assert report.date == dt.date(2025, 8, 2)
    assert report.scores == RiskScores(hot=100, cold=0, windy=33, wet=15, uncomfortable=46)
    assert report.recommendation.startswith("There's a 100% chance of heat")
    assert report.suitable is False
    assert report.suitability_reasons and report.suitability_reasons[0].startswith("Too hot")
    assert report.nearby_hazard is not None
    assert report.nearby_hazard.hazard.id == "storm-1"
    assert report.nearby_hazard.distance_km == pytest.approx(500, abs=0.5)
    assert [a.event for a in report.alerts] == [
        "Heat Warning",
        "Extreme Temperature Warning",
        "Historical Hurricane Nearby",
    ]
    assert report.observation.condition == ConditionCode.CLEAR
    assert report.generated_at == NOW


def test_live_report_suitable_without_hazard():
    raw = {"main": {"temp": 18, "humidity": 40}, "wind": {"speed": 3}, "weather": [{"main": "Clouds"}]}
    report = build_report_from_observation(raw, {"lat": 60.0, "lon": 100.0}, "hiking", CATALOG, now=NOW)
    assert report.suitable is True
    assert report.suitability_reasons == []
    assert report.nearby_hazard is None
    assert report.alerts == []


def test_live_report_uses_configured_radius():
    raw = {"main": "Clear", "temperature": 20, "humidity": 40}
    report = build_report_from_observation(raw, {"lat": 0.0, "lon": 0.0}, "hiking", CATALOG,
                                           radius_km=100, now=NOW)
    assert report.nearby_hazard is None


def test_live_report_accepts_observation():
    observation = Observation(temperature_c=-3, feels_like_c=-8, humidity_pct=70, wind_speed_ms=2,
                              condition=ConditionCode.SNOW)
    report = build_report_from_observation(observation, {"lat": 0, "lon": 0}, ActivityTag.ICE_SKATING, [], now=NOW)
    assert report.suitable is True
    assert [a.event for a in report.alerts] == ["Snow Warning"]


def test_invalid_observation_propagates():
    with pytest.raises(InvalidObservation):
        build_report_from_observation({"humidity": 50}, {"lat": 0, "lon": 0}, "hiking", CATALOG)


def test_unknown_activity_reports_fallback():
    raw = {"main": "Clear", "temperature": 20, "humidity": 40}
    report = build_report_from_observation(raw, {"lat": 0, "lon": 0}, "skydiving", [], now=NOW)
    assert report.activity_fallback is True
    assert report.activity == ActivityTag.HIKING
    assert report.suitable is False


def test_simulated_report_is_reproducible_with_seed():
    first = build_report_from_baseline("beach", {"lat": 25.0, "lon": -80.0}, CATALOG,
                                       rng=random.Random(8), now=NOW)
    second = build_report_from_baseline("beach", {"lat": 25.0, "lon": -80.0}, CATALOG,
                                        rng=random.Random(8), now=NOW)
    assert first == second
    assert first.mode == ReportMode.SIMULATED
    assert first.observation is not None


def test_simulated_scores_stay_near_baseline():
    baseline = ACTIVITY_PROFILES[ActivityTag.PICNIC].baseline
    rng = random.Random(21)
    for _ in range(30):
        report = build_report_from_baseline(ActivityTag.PICNIC, {"lat": 48.0, "lon": 2.0}, [], rng=rng, now=NOW)
        for axis in ("hot", "cold", "windy", "wet", "uncomfortable"):
            assert abs(getattr(report.scores, axis) - getattr(baseline, axis)) <= 15


def test_simulated_report_finds_hazard():
    report = build_report_from_baseline("fishing", {"lat": 0.0, "lon": 0.0}, CATALOG, rng=random.Random(1), now=NOW)
    assert report.nearby_hazard.hazard.id == "storm-1"
