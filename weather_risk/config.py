"""Service configuration pulled from environment variables via pydantic."""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")

BUNDLED_HAZARD_CATALOG = Path(__file__).resolve().parent / "data" / "hazard_catalog.csv"


class Settings(BaseSettings):
    """Environment-driven configuration for the weather risk service."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_RISK_", extra="ignore")

    weather_source: str = "openweathermap"  # options: openweathermap, mock
    openweathermap_api_key: str | None = None
    openweathermap_base_url: str = "https://api.openweathermap.org/data/2.5"
    request_timeout_seconds: float = 10.0
    hazard_catalog_path: str = str(BUNDLED_HAZARD_CATALOG)
    hazard_radius_km: float = 1000.0
    simulated_jitter: float = 15.0
    log_level: str = "INFO"
    job_name: str = "weather_risk_api"

    @field_validator("openweathermap_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return str(v).upper()


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
