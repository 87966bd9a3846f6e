"""Factory helpers for choosing a weather data source at startup."""

from __future__ import annotations

from weather_risk import config
from weather_risk.data_sources.base import (
    CallableWeatherDataSource,
    StaticWeatherDataSource,
    WeatherDataSource,
)
from weather_risk.data_sources.openweathermap_client import fetch_current_weather
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


DEFAULT_SOURCE_NAME = "openweathermap"


def build_data_source(settings: config.Settings | None = None) -> WeatherDataSource:
    """Instantiate the configured weather data source."""
    settings = settings or config.settings
    source = (settings.weather_source or DEFAULT_SOURCE_NAME).lower()

    if source == "openweathermap":
        if not getattr(settings, "openweathermap_api_key", None):
            logger.warning("OpenWeatherMap selected without an API key; live fetches will fail")
        logger.info("Using OpenWeatherMap data source")
        return CallableWeatherDataSource(current_weather=fetch_current_weather)

    if source == "mock":
        logger.info("Using static mock weather data source")
        return StaticWeatherDataSource()

    raise ValueError(f"Unknown weather source '{source}'")
