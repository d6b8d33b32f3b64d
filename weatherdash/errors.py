"""Exception types shared across the dashboard."""


class WeatherDashError(Exception):
    """Base class for dashboard errors."""


class GeolocationUnavailable(WeatherDashError):
    """Raised when no coordinates can be obtained for the user."""


class UpstreamError(WeatherDashError):
    """A weather API fetch failed (network, status, or payload)."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source} fetch failed: {reason}")
        self.source = source
        self.reason = reason
