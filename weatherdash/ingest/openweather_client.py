"""OpenWeatherMap 5 day / 3 hour forecast client."""

from weatherdash.config.schema import OPENWEATHER_BASE_URL
from weatherdash.ingest.fetch import fetch_json
from weatherdash.models.common import LocationQuery, UnitSystem
from weatherdash.models.payloads import SecondaryPayload


class OpenWeatherClient:
    source = "openweather"

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_forecast(self, query: LocationQuery, units: UnitSystem) -> dict:
        """Fetch the 3-hourly forecast. Units are applied server-side."""
        url = f"{self.base_url}/forecast"
        params: dict[str, str | float] = {}
        if query.coordinates is not None:
            params["lat"] = query.coordinates.latitude
            params["lon"] = query.coordinates.longitude
        else:
            params["q"] = query.city or ""
        params["appid"] = self.api_key
        params["units"] = units.value
        return await fetch_json(
            self.source, url, params, self.timeout, SecondaryPayload
        )
