"""Common types and helpers shared across models."""

from dataclasses import dataclass
from enum import StrEnum

GENERIC_ERROR_MESSAGE = "Error fetching the weather data"


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class LocationQuery:
    """Either a free-text city name or a coordinate pair."""

    city: str | None = None
    coordinates: Coordinates | None = None

    def __post_init__(self) -> None:
        if (self.city is None) == (self.coordinates is None):
            raise ValueError("LocationQuery needs exactly one of city or coordinates")

    @classmethod
    def for_city(cls, city: str) -> "LocationQuery":
        return cls(city=city)

    @classmethod
    def for_coordinates(cls, latitude: float, longitude: float) -> "LocationQuery":
        return cls(coordinates=Coordinates(latitude, longitude))

    def __str__(self) -> str:
        if self.coordinates is not None:
            return f"{self.coordinates.latitude},{self.coordinates.longitude}"
        return self.city or ""


def temperature_label(units: UnitSystem) -> str:
    return "°C" if units == UnitSystem.METRIC else "°F"


def wind_speed_label(units: UnitSystem) -> str:
    """Unit of the secondary API's wind speed, which it converts server-side."""
    return "m/s" if units == UnitSystem.METRIC else "mph"
