"""Display-ready weather models produced by the forecast normalizer."""

from dataclasses import dataclass

from weatherdash.models.common import UnitSystem, temperature_label, wind_speed_label


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float | None = None
    longitude: float | None = None


@dataclass(frozen=True)
class CurrentConditions:
    location: Location
    description: str
    icon_ref: str
    temperature: float
    feels_like: float
    humidity_pct: int
    wind_speed_kph: float
    wind_direction: str
    pressure_mb: float
    visibility_km: float
    uv_index: float
    air_quality_index: int | None
    sunrise: str
    sunset: str
    precipitation_mm: float
    dew_point: float | None


@dataclass(frozen=True)
class HourlySlot:
    timestamp: str  # "YYYY-MM-DD HH:MM", local to the location
    icon_ref: str
    description: str
    temperature: float
    precipitation_mm: float


@dataclass(frozen=True)
class DailySlot:
    date: str  # YYYY-MM-DD
    timestamp: int  # unix seconds of the noon entry
    icon_ref: str
    description: str
    temperature: float
    humidity_pct: int
    wind_speed: float
    wind_direction_deg: int
    pressure_mb: float


@dataclass(frozen=True)
class DashboardViewModel:
    """Merged view of both sources.

    ``current`` and ``hourly`` come from the primary API and are ``None``
    together when it is absent. ``daily`` is ``None`` when the secondary API
    is absent and an empty list when it had no noon entries.
    """

    units: UnitSystem
    current: CurrentConditions | None = None
    hourly: list[HourlySlot] | None = None
    daily: list[DailySlot] | None = None

    @property
    def temperature_unit(self) -> str:
        return temperature_label(self.units)

    @property
    def wind_speed_unit(self) -> str:
        return wind_speed_label(self.units)

    @property
    def is_complete(self) -> bool:
        return self.current is not None and self.daily is not None
