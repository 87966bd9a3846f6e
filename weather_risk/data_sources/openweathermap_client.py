"""Fetch current conditions from the OpenWeatherMap current-weather API.

One attempt per call: transport errors and non-2xx responses surface as
UpstreamUnavailable and are never retried here.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from weather_risk import config
from weather_risk.exceptions import UpstreamUnavailable
from utils.logging_utils import get_tagged_logger, mask_url_secrets

logger = get_tagged_logger(__name__, tag="openweathermap_client")

session = requests.Session()

CURRENT_WEATHER_PATH = "/weather"


def fetch_current_weather(latitude: float,
                          longitude: float,
                          *,
                          api_key: Optional[str] = None,
                          base_url: Optional[str] = None,
                          units: str = "metric",
                          timeout: Optional[float] = None,
                          ) -> Dict[str, Any]:
    """Return the raw OpenWeatherMap payload for the given coordinates."""
    settings = config.settings
    api_key = api_key or settings.openweathermap_api_key
    base_url = (base_url or settings.openweathermap_base_url).rstrip("/")
    timeout = timeout if timeout is not None else settings.request_timeout_seconds

    if not api_key:
        raise UpstreamUnavailable("OpenWeatherMap API key is not configured")

    params = {
        "lat": latitude,
        "lon": longitude,
        "units": units,
        "appid": api_key,
    }
    url = f"{base_url}{CURRENT_WEATHER_PATH}"

    try:
        resp = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning(f"OpenWeatherMap request failed: {exc}")
        raise UpstreamUnavailable(f"OpenWeatherMap request failed: {exc}") from exc

    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status_code = getattr(resp, "status_code", None)
        logger.warning(
            f"OpenWeatherMap returned status {status_code} for "
            f"{mask_url_secrets(str(getattr(resp, 'url', url)))}"
        )
        raise UpstreamUnavailable(
            f"OpenWeatherMap error status: {status_code}", status_code=status_code
        ) from exc

    try:
        data = resp.json()
    except ValueError as exc:
        raise UpstreamUnavailable("OpenWeatherMap returned a non-JSON body") from exc

    if not isinstance(data, dict):
        raise UpstreamUnavailable("OpenWeatherMap returned an unexpected payload")

    logger.debug(f"Fetched current weather for ({latitude}, {longitude})")
    return data


def main():
    """Manual test helper: print the normalized observation for one point."""
    from weather_risk.normalizer import normalize

    lat, lon = 30.0444, 31.2357
    raw = fetch_current_weather(lat, lon)
    print(normalize(raw))


if __name__ == "__main__":
    main()
