"""Interfaces and helpers for weather data sources."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Protocol


class WeatherDataSource(Protocol):
    """Interface for anything that can hand back a raw current-weather record."""

    def fetch_current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Return the provider's raw current-weather payload."""
        ...


@dataclass
class CallableWeatherDataSource(WeatherDataSource):
    """Wrap a fetch callable so providers can be swapped at startup."""

    current_weather: Callable[..., Dict[str, Any]]

    def fetch_current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Delegate to the configured current-weather callable."""
        return self.current_weather(latitude, longitude)


# Fixed clear-sky record served when no provider is configured.
MOCK_CURRENT_WEATHER: Dict[str, Any] = {
    "city": "Mock City",
    "country": "MC",
    "main": "Clear",
    "description": "clear sky",
    "temperature": 25,
    "humidity": 40,
    "wind": 3.5,
}


@dataclass
class StaticWeatherDataSource(WeatherDataSource):
    """Return the same raw record for every coordinate (dev/demo use)."""

    record: Dict[str, Any] = field(default_factory=lambda: copy.deepcopy(MOCK_CURRENT_WEATHER))

    def fetch_current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Return a copy of the static record tagged with the query point."""
        payload = copy.deepcopy(self.record)
        payload["coord"] = {"lat": latitude, "lon": longitude}
        return payload
