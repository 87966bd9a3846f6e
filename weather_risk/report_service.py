"""Compose normalization, scoring, suitability and hazard lookup into a RiskReport."""
from __future__ import annotations

import datetime as dt
import random
from typing import Any, Mapping, Sequence, Union

from weather_risk.activities import Activity, resolve_activity
from weather_risk.alerts import generate_alerts
from weather_risk.domain import (
    ActivityTag,
    Coordinates,
    HazardRecord,
    Observation,
    ObservationSummary,
    ReportMode,
    RiskReport,
    RiskScores,
)
from weather_risk.hazards import DEFAULT_RADIUS_KM, find_nearest
from weather_risk.normalizer import normalize
from weather_risk.recommendation import recommend
from weather_risk.scoring import DEFAULT_JITTER, score_from_baseline, score_from_observation
from weather_risk.simulation import simulate_raw_weather
from weather_risk.suitability import explain_suitability, is_suitable
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="report_service")

ActivityLike = Union[Activity, ActivityTag, str]
LocationLike = Union[Coordinates, Mapping[str, float]]


def _as_activity(activity: ActivityLike) -> Activity:
    return activity if isinstance(activity, Activity) else resolve_activity(activity)


def _as_coordinates(location: LocationLike) -> Coordinates:
    if isinstance(location, Coordinates):
        return location
    lon = location.get("lon", location.get("lng"))
    return Coordinates(lat=location["lat"], lon=lon)


def _assemble(
    *,
    mode: ReportMode,
    activity: Activity,
    location: Coordinates,
    report_date: dt.date | None,
    scores: RiskScores,
    observation: Observation,
    hazard_catalog: Sequence[HazardRecord],
    radius_km: float,
    now: dt.datetime,
) -> RiskReport:
    suitable = is_suitable(activity, observation)
    reasons = [] if suitable else explain_suitability(activity, observation)
    nearby = find_nearest(hazard_catalog, location, radius_km)
    alerts = generate_alerts(observation, nearby_hazard=nearby, now=now)

    logger.info(
        f"Built risk report: mode={mode.value} activity={activity.tag.value} "
        f"suitable={suitable} hazard={nearby.hazard.id if nearby else None} alerts={len(alerts)}"
    )

    return RiskReport(
        mode=mode,
        activity=activity.tag,
        activity_fallback=activity.fallback,
        location=location,
        date=report_date,
        scores=scores,
        suitable=suitable,
        suitability_reasons=reasons,
        recommendation=recommend(scores),
        nearby_hazard=nearby,
        alerts=alerts,
        observation=ObservationSummary.from_observation(observation),
        generated_at=now,
    )


def build_report_from_observation(
    raw: Any,
    location: LocationLike,
    activity: ActivityLike,
    hazard_catalog: Sequence[HazardRecord],
    *,
    report_date: dt.date | None = None,
    radius_km: float = DEFAULT_RADIUS_KM,
    now: dt.datetime | None = None,
) -> RiskReport:
    """
    Live path: normalize a raw provider record and score it.

    InvalidObservation from normalization propagates unchanged.
    """
    observation = raw if isinstance(raw, Observation) else normalize(raw)
    return _assemble(
        mode=ReportMode.LIVE,
        activity=_as_activity(activity),
        location=_as_coordinates(location),
        report_date=report_date,
        scores=score_from_observation(observation),
        observation=observation,
        hazard_catalog=hazard_catalog,
        radius_km=radius_km,
        now=now or dt.datetime.now(dt.timezone.utc),
    )


def build_report_from_baseline(
    activity: ActivityLike,
    location: LocationLike,
    hazard_catalog: Sequence[HazardRecord],
    *,
    report_date: dt.date | None = None,
    radius_km: float = DEFAULT_RADIUS_KM,
    rng: random.Random | None = None,
    jitter: float = DEFAULT_JITTER,
    now: dt.datetime | None = None,
) -> RiskReport:
    """
    Simulated path: jitter the activity baseline into risk scores.

    Suitability and alerts are judged against a simulated observation for the
    location, drawn from the same random source.
    """
    rng = rng or random.Random()
    resolved = _as_activity(activity)
    coords = _as_coordinates(location)

    scores = score_from_baseline(resolved.baseline, rng=rng, jitter=jitter)
    observation = normalize(simulate_raw_weather(coords.lat, coords.lon, rng=rng))

    return _assemble(
        mode=ReportMode.SIMULATED,
        activity=resolved,
        location=coords,
        report_date=report_date,
        scores=scores,
        observation=observation,
        hazard_catalog=hazard_catalog,
        radius_km=radius_km,
        now=now or dt.datetime.now(dt.timezone.utc),
    )
