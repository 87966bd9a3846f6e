"""Error types raised by the risk engine and its provider clients."""


class WeatherRiskError(Exception):
    """Base class for all service errors."""


class InvalidObservation(WeatherRiskError, ValueError):
    """A raw weather record is missing required fields or holds unusable values."""


class UpstreamUnavailable(WeatherRiskError):
    """The weather provider could not be reached or returned an error status.

    Raised once per failed request; nothing in the engine retries or masks it.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
