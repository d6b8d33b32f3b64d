"""Geolocation sources yielding coordinates or GeolocationUnavailable."""

import logging
from typing import Protocol

import httpx

from weatherdash.config.schema import (
    IP_LOOKUP_URL,
    GeolocationConfig,
    GeolocationProvider,
)
from weatherdash.errors import GeolocationUnavailable
from weatherdash.models.common import Coordinates

logger = logging.getLogger(__name__)


class GeoLocator(Protocol):
    async def locate(self) -> Coordinates: ...


class IpGeoLocator:
    """Approximate position from the caller's public IP address."""

    def __init__(self, lookup_url: str = IP_LOOKUP_URL, timeout: float = 4.0):
        self.lookup_url = lookup_url
        self.timeout = timeout

    async def locate(self) -> Coordinates:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(self.lookup_url)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GeolocationUnavailable(f"IP lookup failed: {e}") from e

        lat = data.get("latitude") if isinstance(data, dict) else None
        lon = data.get("longitude") if isinstance(data, dict) else None
        if lat is None or lon is None:
            raise GeolocationUnavailable("IP lookup returned no coordinates")
        try:
            coords = Coordinates(float(lat), float(lon))
        except (TypeError, ValueError) as e:
            raise GeolocationUnavailable(f"bad coordinates: {lat!r}, {lon!r}") from e
        logger.debug("IP geolocation resolved to %s", coords)
        return coords


class StaticGeoLocator:
    def __init__(self, coordinates: Coordinates | None):
        self.coordinates = coordinates

    async def locate(self) -> Coordinates:
        if self.coordinates is None:
            raise GeolocationUnavailable("geolocation disabled")
        return self.coordinates


def build_geolocator(config: GeolocationConfig) -> GeoLocator:
    if config.provider == GeolocationProvider.IP:
        return IpGeoLocator(config.ip_lookup_url, config.timeout_seconds)
    if config.provider == GeolocationProvider.STATIC:
        assert config.latitude is not None and config.longitude is not None
        return StaticGeoLocator(Coordinates(config.latitude, config.longitude))
    return StaticGeoLocator(None)
