"""Dashboard controller: fetches both sources, normalizes, updates state."""

import asyncio
import logging

from pydantic import ValidationError

from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import GeolocationUnavailable, UpstreamError
from weatherdash.ingest.geolocator import GeoLocator, build_geolocator
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.ingest.weatherapi_client import WeatherApiClient
from weatherdash.models.common import LocationQuery, UnitSystem
from weatherdash.pipeline import state as transitions
from weatherdash.pipeline.normalizer import normalize
from weatherdash.pipeline.state import DashboardState

logger = logging.getLogger(__name__)


class DashboardController:
    """Owns the single DashboardState and is the only thing that changes it."""

    def __init__(
        self,
        config: DashboardConfig,
        primary: WeatherApiClient,
        secondary: OpenWeatherClient,
        geolocator: GeoLocator,
    ):
        self.config = config
        self.primary = primary
        self.secondary = secondary
        self.geolocator = geolocator
        self.state = DashboardState(
            units=config.display.units, theme=config.display.theme
        )
        self._last_token = 0
        self._last_query: LocationQuery | None = None

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "DashboardController":
        timeout = config.http.timeout_seconds
        return cls(
            config,
            WeatherApiClient(
                config.weatherapi.api_key, config.weatherapi.base_url, timeout
            ),
            OpenWeatherClient(
                config.openweather.api_key, config.openweather.base_url, timeout
            ),
            build_geolocator(config.geolocation),
        )

    @property
    def last_query(self) -> LocationQuery | None:
        return self._last_query

    async def initialize(self) -> DashboardState:
        """Fetch for the user's position, or the default city without one."""
        try:
            coords = await self.geolocator.locate()
            query = LocationQuery(coordinates=coords)
        except GeolocationUnavailable as e:
            logger.info(
                "Geolocation unavailable (%s), using %s",
                e, self.config.display.default_city,
            )
            query = LocationQuery.for_city(self.config.display.default_city)
        return await self.refresh(query)

    async def search(self, city: str) -> DashboardState:
        city = city.strip()
        if not city:
            raise ValueError("city must not be empty")
        self.state = transitions.with_city_query(self.state, city)
        return await self.refresh(LocationQuery.for_city(city))

    async def change_units(self, units: UnitSystem) -> DashboardState:
        """Switch units and refetch the last location in the new units."""
        self.state = transitions.with_units(self.state, units)
        if self._last_query is None:
            return self.state
        return await self.refresh(self._last_query)

    def toggle_theme(self) -> DashboardState:
        self.state = transitions.toggle_theme(self.state)
        return self.state

    async def refresh(self, query: LocationQuery) -> DashboardState:
        """Fetch both sources concurrently and apply the outcome.

        Only the most recently issued refresh may change the state; an older
        one that settles late is discarded.
        """
        self._last_token += 1
        token = self._last_token
        self._last_query = query
        units = self.state.units
        self.state = transitions.begin_loading(self.state, token)
        logger.info("Refresh #%d for %s (%s)", token, query, units)

        try:
            primary, secondary = await asyncio.gather(
                self.primary.get_forecast(query),
                self.secondary.get_forecast(query, units),
                return_exceptions=True,
            )
            for result in (primary, secondary):
                if isinstance(result, BaseException) and not isinstance(
                    result, UpstreamError
                ):
                    raise result
        except Exception:
            # Never propagate while still in loading
            self.state = transitions.resolve_failed(self.state, token)
            raise

        if not transitions.is_current(self.state, token):
            logger.warning(
                "Discarding stale refresh #%d (latest is #%d)",
                token, self.state.request_token,
            )
            return self.state

        self.state = self._resolve(token, primary, secondary, units)
        return self.state

    def _resolve(
        self, token: int, primary, secondary, units: UnitSystem
    ) -> DashboardState:
        failures = [r for r in (primary, secondary) if isinstance(r, UpstreamError)]
        for failure in failures:
            logger.error("Refresh #%d: %s", token, failure)

        if len(failures) == 2 or (failures and not self.config.display.partial_results):
            return transitions.resolve_failed(self.state, token)

        try:
            view_model = normalize(
                None if isinstance(primary, UpstreamError) else primary,
                None if isinstance(secondary, UpstreamError) else secondary,
                units,
            )
        except ValidationError:
            logger.exception("Refresh #%d: payload could not be normalized", token)
            return transitions.resolve_failed(self.state, token)

        if not view_model.is_complete:
            logger.info(
                "Refresh #%d: showing partial results without %s",
                token, ", ".join(f.source for f in failures),
            )
        return transitions.resolve_ready(self.state, token, view_model)
