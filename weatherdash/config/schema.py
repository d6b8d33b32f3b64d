"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

from weatherdash.models.common import Theme, UnitSystem

WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1"
OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
IP_LOOKUP_URL = "https://ipapi.co/json/"
DEFAULT_CITY = "London"


class GeolocationProvider(StrEnum):
    IP = "ip"
    STATIC = "static"
    DISABLED = "disabled"


class WeatherApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = WEATHERAPI_BASE_URL
    api_key: str = ""


class OpenWeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    api_key: str = ""


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeout_seconds: float = Field(default=30.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    units: UnitSystem = UnitSystem.METRIC
    theme: Theme = Theme.LIGHT
    default_city: str = Field(default=DEFAULT_CITY, min_length=1)
    partial_results: bool = False


class GeolocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: GeolocationProvider = GeolocationProvider.IP
    ip_lookup_url: str = IP_LOOKUP_URL
    timeout_seconds: float = Field(default=4.0, gt=0.0)
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def _coordinates_paired(self) -> "GeolocationConfig":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        if self.provider == GeolocationProvider.STATIC and self.latitude is None:
            raise ValueError("static geolocation requires latitude and longitude")
        return self


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weatherapi: WeatherApiConfig = WeatherApiConfig()
    openweather: OpenWeatherConfig = OpenWeatherConfig()
    http: HttpConfig = HttpConfig()
    display: DisplayConfig = DisplayConfig()
    geolocation: GeolocationConfig = GeolocationConfig()
