"""weatherapi.com client: current conditions, hourly forecast, astro data."""

from weatherdash.config.schema import WEATHERAPI_BASE_URL
from weatherdash.ingest.fetch import fetch_json
from weatherdash.models.common import LocationQuery
from weatherdash.models.payloads import PrimaryPayload


class WeatherApiClient:
    source = "weatherapi"

    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHERAPI_BASE_URL,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_forecast(self, query: LocationQuery) -> dict:
        """Fetch today's forecast with air quality for a city or "lat,lon"."""
        url = f"{self.base_url}/forecast.json"
        params = {
            "key": self.api_key,
            "q": str(query),
            "days": 1,
            "aqi": "yes",
            "alerts": "yes",
        }
        return await fetch_json(self.source, url, params, self.timeout, PrimaryPayload)
