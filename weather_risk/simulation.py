"""Simulated raw weather for the mock report path.

Produces a flat raw record (same shape the normalizer accepts) with values
biased by latitude band and a randomly drawn sky condition.
"""

from __future__ import annotations

import random
from typing import Dict, List

CONDITION_DESCRIPTIONS = {
    "clear": "clear sky",
    "clouds": "few clouds",
    "rain": "light rain",
    "snow": "light snow",
    "mist": "mist",
}


def _base_temperature(lat: float) -> float:
    """Latitude-band starting temperature in deg C."""
    base = 20.0
    if -30 < lat < 30:
        base = 28.0  # tropical
    if lat > 60 or lat < -60:
        base = 5.0  # polar
    if 20 < abs(lat) < 30:
        base = 32.0  # subtropical desert belt
    return base


def _candidate_conditions(lat: float, rng: random.Random) -> List[str]:
    conditions = ["clear"]
    if rng.random() > 0.3:
        conditions.append("clouds")
    if 40 < lat < 60:
        conditions.append("rain")
    if lat > 50 or lat < -50:
        conditions.append("snow")
    if rng.random() > 0.7:
        conditions.append("mist")
    return conditions


def _humidity_for(condition: str, tropical: bool, rng: random.Random) -> int:
    base = 70 if tropical else 50
    if condition == "rain":
        return round(base + rng.random() * 25)
    if condition == "mist":
        return round(base + rng.random() * 30)
    if condition == "clear":
        return round(base - rng.random() * 20)
    return round(base + (rng.random() - 0.5) * 20)


def _wind_for(condition: str, rng: random.Random) -> int:
    if condition == "rain":
        return round(5 + rng.random() * 10)
    if condition == "clear":
        return round(2 + rng.random() * 8)
    if condition == "clouds":
        return round(3 + rng.random() * 12)
    return round(1 + rng.random() * 15)


def simulate_raw_weather(lat: float, lon: float, *, rng: random.Random | None = None) -> Dict[str, object]:
    """Return a plausible flat raw weather record for the given coordinates.

    `lon` does not influence the draw; it is echoed back as part of the record.
    """
    rng = rng or random.Random()
    tropical = -30 < lat < 30

    temperature = round(_base_temperature(lat) + (rng.random() - 0.5) * 8)
    conditions = _candidate_conditions(lat, rng)
    main = conditions[int(rng.random() * len(conditions))]

    return {
        "lat": lat,
        "lon": lon,
        "temperature": temperature,
        "feelsLike": round(temperature + (rng.random() - 0.5) * 3),
        "humidity": _humidity_for(main, tropical, rng),
        "pressure": round(1000 + (rng.random() - 0.5) * 30),
        "windSpeed": _wind_for(main, rng),
        "main": main.title(),
        "description": CONDITION_DESCRIPTIONS.get(main, "clear sky"),
    }
