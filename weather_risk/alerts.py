"""Deterministic alert banners derived from an observation and nearby hazards."""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from weather_risk.domain import (
    AlertSeverity,
    ConditionCode,
    HazardMatch,
    Observation,
    WeatherAlert,
)

ALERT_DURATION = dt.timedelta(hours=1)

HEAT_WARNING_C = 35.0
COLD_WARNING_C = -10.0
EXTREME_HEAT_C = 40.0
EXTREME_COLD_C = -20.0
HIGH_WIND_MS = 15.0
DANGEROUS_WIND_MS = 25.0
HEAVY_RAIN_HUMIDITY = 90
TORNADO_KEYWORD = "tornado"


def _alert(event: str, description: str, severity: AlertSeverity, now: dt.datetime) -> WeatherAlert:
    return WeatherAlert(
        event=event,
        description=description,
        severity=severity,
        start=now,
        end=now + ALERT_DURATION,
    )


def generate_alerts(
    obs: Observation,
    *,
    nearby_hazard: Optional[HazardMatch] = None,
    now: Optional[dt.datetime] = None,
) -> List[WeatherAlert]:
    """Return alert banners for `obs`, each valid for one hour from `now`."""
    now = now or dt.datetime.now(dt.timezone.utc)
    temp = obs.temperature_c
    wind = obs.wind_speed_ms
    alerts: List[WeatherAlert] = []

    if TORNADO_KEYWORD in (obs.description or "").lower():
        alerts.append(_alert(
            "Tornado Warning",
            "Tornado conditions detected. Seek immediate shelter.",
            AlertSeverity.EXTREME, now,
        ))

    if temp > HEAT_WARNING_C:
        alerts.append(_alert(
            "Heat Warning",
            f"High temperature: {round(temp)}C. Stay hydrated and avoid prolonged sun exposure.",
            AlertSeverity.SEVERE, now,
        ))
    if temp < COLD_WARNING_C:
        alerts.append(_alert(
            "Cold Warning",
            f"Low temperature: {round(temp)}C. Dress warmly and avoid prolonged exposure.",
            AlertSeverity.SEVERE, now,
        ))
    if temp > EXTREME_HEAT_C or temp < EXTREME_COLD_C:
        alerts.append(_alert(
            "Extreme Temperature Warning",
            f"Extreme temperature: {round(temp)}C",
            AlertSeverity.SEVERE, now,
        ))

    if wind > DANGEROUS_WIND_MS:
        alerts.append(_alert(
            "High Wind Warning",
            f"Dangerous wind speeds detected: {wind:.1f} m/s",
            AlertSeverity.SEVERE, now,
        ))
    elif wind > HIGH_WIND_MS:
        alerts.append(_alert(
            "High Wind Warning",
            f"Strong winds: {wind:.1f} m/s. Secure loose objects and avoid outdoor activities.",
            AlertSeverity.MODERATE, now,
        ))

    if obs.condition == ConditionCode.THUNDERSTORM:
        alerts.append(_alert(
            "Thunderstorm Warning",
            "Thunderstorm conditions detected. Seek shelter immediately and avoid outdoor activities.",
            AlertSeverity.SEVERE, now,
        ))
    if obs.condition == ConditionCode.SNOW:
        alerts.append(_alert(
            "Snow Warning",
            "Snow conditions detected. Drive carefully and dress warmly.",
            AlertSeverity.MODERATE, now,
        ))
    if obs.condition == ConditionCode.RAIN and obs.humidity_pct > HEAVY_RAIN_HUMIDITY:
        alerts.append(_alert(
            "Heavy Rain Warning",
            "Heavy rainfall with high humidity detected. Risk of flooding.",
            AlertSeverity.MODERATE, now,
        ))

    if nearby_hazard is not None:
        hazard = nearby_hazard.hazard
        when = f" ({hazard.date})" if hazard.date else ""
        alerts.append(_alert(
            f"Historical {hazard.category.title()} Nearby",
            f"{hazard.id}{when} passed {nearby_hazard.distance_km:.0f} km from this location.",
            AlertSeverity.MINOR, now,
        ))

    return alerts
