"""HTTP API for the weather risk service."""

import datetime as dt
import random
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from .activities import ACTIVITY_PROFILES
from .config import settings
from .data_sources import build_data_source
from .domain import Coordinates, ReportMode, RiskReport, RiskScores
from .exceptions import InvalidObservation, UpstreamUnavailable
from .hazards import load_hazard_catalog
from .report_service import build_report_from_baseline, build_report_from_observation
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_risk/api")

router = APIRouter()
DATA_SOURCE = build_data_source(settings)
HAZARD_CATALOG = load_hazard_catalog(settings.hazard_catalog_path)


class ReportRequest(BaseModel):
    """Incoming report request."""
    location: Coordinates
    date: Optional[dt.date] = None
    activity: str
    mode: ReportMode
    observation: Optional[Dict[str, Any]] = None  # raw provider record; fetched when absent
    seed: Optional[int] = None  # simulated mode only


class ActivityInfo(BaseModel):
    """Activity tag with its baseline risk weights."""
    tag: str
    baseline: RiskScores


class ActivitiesResponse(BaseModel):
    """List of supported activities."""
    activities: List[ActivityInfo]


def _fetch_raw_observation(location: Coordinates) -> Dict[str, Any]:
    """Fetch a raw record from the configured source; failures surface as 502."""
    try:
        return DATA_SOURCE.fetch_current_weather(location.lat, location.lon)
    except UpstreamUnavailable as exc:
        logger.warning(f"Weather provider unavailable: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY,
                            detail=f"Weather provider unavailable: {exc}")


@router.post("/report", response_model=RiskReport)
def create_report(req: ReportRequest):
    """Build a risk report for a location, date and activity."""
    logger.info(f"Report requested: mode={req.mode.value} activity={req.activity} "
                f"location=({req.location.lat}, {req.location.lon})")

    if req.mode == ReportMode.SIMULATED:
        rng = random.Random(req.seed) if req.seed is not None else None
        return build_report_from_baseline(
            req.activity,
            req.location,
            HAZARD_CATALOG,
            report_date=req.date,
            radius_km=settings.hazard_radius_km,
            rng=rng,
            jitter=settings.simulated_jitter,
        )

    raw = req.observation if req.observation is not None else _fetch_raw_observation(req.location)
    try:
        return build_report_from_observation(
            raw,
            req.location,
            req.activity,
            HAZARD_CATALOG,
            report_date=req.date,
            radius_km=settings.hazard_radius_km,
        )
    except InvalidObservation as exc:
        logger.warning(f"Rejected weather observation: {exc}")
        raise HTTPException(status_code=422, detail=str(exc))


@router.get("/activities", response_model=ActivitiesResponse)
def list_activities():
    """Return every supported activity tag with its baseline weights."""
    return ActivitiesResponse(
        activities=[
            ActivityInfo(tag=tag.value, baseline=profile.baseline)
            for tag, profile in ACTIVITY_PROFILES.items()
        ]
    )


@router.get("/health")
def health():
    """Liveness probe with catalog size and configured source."""
    return {
        "status": "ok",
        "weather_source": settings.weather_source,
        "hazard_records": len(HAZARD_CATALOG),
    }
