"""Convert raw provider weather records into canonical Observation values.

Two record shapes are accepted: the nested OpenWeatherMap current-weather
payload (``main.temp``, ``wind.speed``, ``weather[0].main`` ...) and the flat
shape the original dashboard passed around (``temperature``, ``humidity``,
``wind``, ``main`` ...).
"""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from weather_risk.domain import ConditionCode, Observation
from weather_risk.exceptions import InvalidObservation
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="normalizer")

# Checked in order; the first keyword found in the condition text wins.
CONDITION_KEYWORDS: tuple[tuple[str, ConditionCode], ...] = (
    ("rain", ConditionCode.RAIN),
    ("snow", ConditionCode.SNOW),
    ("mist", ConditionCode.MIST),
    ("thunder", ConditionCode.THUNDERSTORM),
    ("cloud", ConditionCode.CLOUDS),
    ("clear", ConditionCode.CLEAR),
)


def _get_field(record: Any, key: str, default=None):
    """Support attribute, dict, or Mapping access for raw records."""
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def _first(record: Any, *keys: str):
    """Return the first non-None value among the given keys."""
    for key in keys:
        value = _get_field(record, key)
        if value is not None:
            return value
    return None


def _to_float(value: Any) -> Optional[float]:
    """Coerce ints, floats and numeric strings; None for anything else."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None


def parse_condition(text: Optional[str]) -> ConditionCode:
    """Map free-text condition wording to a ConditionCode (case-insensitive)."""
    if not isinstance(text, str) or not text.strip():
        return ConditionCode.UNKNOWN
    lowered = text.lower()
    for keyword, code in CONDITION_KEYWORDS:
        if keyword in lowered:
            return code
    return ConditionCode.UNKNOWN


def _condition_texts(raw: Any) -> tuple[Optional[str], Optional[str]]:
    """Pull the short label and description from either record shape."""
    weather = _get_field(raw, "weather")
    if isinstance(weather, (list, tuple)) and weather:
        entry = weather[0]
        return _get_field(entry, "main"), _get_field(entry, "description")

    main = _get_field(raw, "main")
    label = main if isinstance(main, str) else _first(raw, "condition", "conditionCode")
    return label, _get_field(raw, "description")


def _required_number(value: Any, name: str) -> float:
    number = _to_float(value)
    if number is None:
        raise InvalidObservation(f"{name} is missing or not numeric: {value!r}")
    return number


def normalize(raw: Any) -> Observation:
    """Pure function: build an Observation from a raw provider record.

    Raises InvalidObservation when temperature or humidity is absent or not
    numeric, or when a supplied wind speed is not numeric or negative.
    """
    if raw is None:
        raise InvalidObservation("raw weather record is empty")

    main_block = _get_field(raw, "main")
    if isinstance(main_block, Mapping):
        # OpenWeatherMap nested shape
        temp_raw = _get_field(main_block, "temp")
        feels_raw = _get_field(main_block, "feels_like")
        humidity_raw = _get_field(main_block, "humidity")
        pressure_raw = _get_field(main_block, "pressure")
        wind_raw = _get_field(_get_field(raw, "wind"), "speed")
    else:
        temp_raw = _first(raw, "temperature", "temp", "temperatureC")
        feels_raw = _first(raw, "feelsLike", "feels_like", "feelsLikeC")
        humidity_raw = _first(raw, "humidity", "humidityPct")
        pressure_raw = _first(raw, "pressure", "pressureHPa")
        wind_raw = _first(raw, "windSpeed", "wind_speed", "windSpeedMs", "wind")
        if isinstance(wind_raw, Mapping):
            wind_raw = _get_field(wind_raw, "speed")

    temperature = _required_number(temp_raw, "temperature")
    humidity = _required_number(humidity_raw, "humidity")

    if wind_raw is None:
        wind_speed = 0.0
    else:
        wind_speed = _required_number(wind_raw, "wind speed")

    feels_like = _to_float(feels_raw)
    if feels_like is None:
        feels_like = temperature

    label, description = _condition_texts(raw)
    condition = parse_condition(label)
    if condition is ConditionCode.UNKNOWN:
        condition = parse_condition(description)
    if condition is ConditionCode.UNKNOWN:
        logger.debug(f"Unrecognized condition text (label={label!r}, description={description!r}); "
                     "treating as unknown")
    if not isinstance(description, str) or not description.strip():
        # a bare label such as "Tornado" still reaches the alert rules
        description = label

    return Observation(
        temperature_c=temperature,
        feels_like_c=feels_like,
        humidity_pct=humidity,
        wind_speed_ms=wind_speed,
        condition=condition,
        description=description if isinstance(description, str) else None,
        pressure_hpa=_to_float(pressure_raw),
    )
