"""Domain vocabulary and schemas for weather risk reports.

This module defines the contract between the scoring engine and its callers:
enums, the canonical Observation snapshot, and the Pydantic models for the
payloads returned to the presentation layer. No scoring logic lives here.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_risk.exceptions import InvalidObservation


class _StrictBaseModel(BaseModel):
    """Base model with strict extra handling."""

    model_config = ConfigDict(extra="forbid")


class ConditionCode(str, Enum):
    """Canonical sky/precipitation condition."""
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    SNOW = "Snow"
    MIST = "Mist"
    THUNDERSTORM = "Thunderstorm"
    UNKNOWN = "Unknown"


class ActivityTag(str, Enum):
    """Outdoor activities with a baseline profile and suitability rule."""
    HIKING = "hiking"
    FISHING = "fishing"
    BEACH = "beach"
    PICNIC = "picnic"
    SPORTS = "sports"
    WALKING = "walking"
    CYCLING = "cycling"
    BARBECUE = "barbecue"
    ICE_SKATING = "iceSkating"
    SWIMMING = "swimming"
    OTHER = "other"


class ReportMode(str, Enum):
    """Which scoring path produced a report."""
    LIVE = "live"
    SIMULATED = "simulated"


class AlertSeverity(str, Enum):
    """Severity levels used for alert banners."""
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    EXTREME = "extreme"


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


@dataclass(frozen=True)
class Observation:
    """Canonical weather snapshot used as scoring input."""
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_speed_ms: float
    condition: ConditionCode = ConditionCode.UNKNOWN
    description: Optional[str] = None
    pressure_hpa: Optional[float] = None

    def __post_init__(self):
        if not _is_finite_number(self.temperature_c):
            raise InvalidObservation(f"temperature must be a finite number, got {self.temperature_c!r}")
        if not _is_finite_number(self.feels_like_c):
            raise InvalidObservation(f"feels-like temperature must be a finite number, got {self.feels_like_c!r}")
        if not _is_finite_number(self.wind_speed_ms) or self.wind_speed_ms < 0:
            raise InvalidObservation(f"wind speed must be a non-negative number, got {self.wind_speed_ms!r}")
        if not _is_finite_number(self.humidity_pct):
            raise InvalidObservation(f"humidity must be a finite number, got {self.humidity_pct!r}")
        # frozen dataclass: write the clamped value through object.__setattr__
        object.__setattr__(self, "humidity_pct", int(max(0, min(100, round(self.humidity_pct)))))


class RiskScores(_StrictBaseModel):
    """Five bounded risk percentages."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    hot: int = Field(ge=0, le=100)
    cold: int = Field(ge=0, le=100)
    windy: int = Field(ge=0, le=100)
    wet: int = Field(ge=0, le=100)
    uncomfortable: int = Field(ge=0, le=100)


class Coordinates(_StrictBaseModel):
    """A point on the globe in decimal degrees."""
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class HazardRecord(BaseModel):
    """One row of the historical hazard catalog.

    Coordinates are kept as supplied: dataset rows may carry strings, and rows
    whose coordinates do not parse are skipped by the proximity lookup.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str
    category: str
    lat: float | str | None = None
    lon: float | str | None = None
    pressure_hpa: float | None = None
    date: str | None = None


class HazardMatch(_StrictBaseModel):
    """A catalog hazard found within the query radius."""
    hazard: HazardRecord
    distance_km: float


class WeatherAlert(_StrictBaseModel):
    """Alert banner derived from an observation or a nearby hazard."""
    event: str
    description: str
    severity: AlertSeverity
    start: dt.datetime
    end: dt.datetime


class ObservationSummary(_StrictBaseModel):
    """Serialized Observation included in reports."""
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_speed_ms: float
    condition: ConditionCode
    description: str | None = None
    pressure_hpa: float | None = None

    @classmethod
    def from_observation(cls, obs: Observation) -> "ObservationSummary":
        return cls(
            temperature_c=obs.temperature_c,
            feels_like_c=obs.feels_like_c,
            humidity_pct=obs.humidity_pct,
            wind_speed_ms=obs.wind_speed_ms,
            condition=obs.condition,
            description=obs.description,
            pressure_hpa=obs.pressure_hpa,
        )


class RiskReport(_StrictBaseModel):
    """Full report for one location/date/activity request."""
    mode: ReportMode
    activity: ActivityTag
    activity_fallback: bool = False
    location: Coordinates
    date: dt.date | None = None
    scores: RiskScores
    suitable: bool
    suitability_reasons: List[str] = Field(default_factory=list)
    recommendation: str = ""
    nearby_hazard: HazardMatch | None = None
    alerts: List[WeatherAlert] = Field(default_factory=list)
    observation: ObservationSummary | None = None
    generated_at: dt.datetime | None = None
