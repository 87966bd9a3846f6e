"""Weather providers that feed raw records into the risk engine."""

from .base import CallableWeatherDataSource, StaticWeatherDataSource, WeatherDataSource
from .factory import build_data_source
from .openweathermap_client import fetch_current_weather

__all__ = [
    "build_data_source",
    "WeatherDataSource",
    "CallableWeatherDataSource",
    "StaticWeatherDataSource",
    "fetch_current_weather",
]
