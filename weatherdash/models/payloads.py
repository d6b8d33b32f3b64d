"""Pydantic models for the raw upstream API responses.

Only the fields the dashboard reads are declared; anything else the APIs
send is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

# ── weatherapi.com forecast.json ────────────────────────────────


class Condition(BaseModel):
    text: str
    icon: str


class AirQuality(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    us_epa_index: int | None = Field(default=None, alias="us-epa-index")


class PrimaryLocation(BaseModel):
    name: str
    lat: float | None = None
    lon: float | None = None


class PrimaryCurrent(BaseModel):
    condition: Condition
    temp_c: float
    temp_f: float
    feelslike_c: float
    feelslike_f: float
    humidity: int
    wind_kph: float
    wind_dir: str
    pressure_mb: float
    vis_km: float
    uv: float
    precip_mm: float
    dewpoint_c: float | None = None
    dewpoint_f: float | None = None
    air_quality: AirQuality | None = None


class Astro(BaseModel):
    sunrise: str
    sunset: str


class PrimaryHour(BaseModel):
    time: str
    condition: Condition
    temp_c: float
    temp_f: float
    precip_mm: float


class ForecastDay(BaseModel):
    astro: Astro
    hour: list[PrimaryHour]


class PrimaryForecast(BaseModel):
    forecastday: list[ForecastDay] = Field(min_length=1)


class PrimaryPayload(BaseModel):
    location: PrimaryLocation
    current: PrimaryCurrent
    forecast: PrimaryForecast


# ── openweathermap.org forecast (5 day / 3 hour) ────────────────


class SecondaryMain(BaseModel):
    temp: float
    humidity: int
    pressure: float


class SecondaryWeather(BaseModel):
    description: str
    icon: str


class SecondaryWind(BaseModel):
    speed: float
    deg: int


class SecondaryEntry(BaseModel):
    dt: int
    dt_txt: str
    main: SecondaryMain
    weather: list[SecondaryWeather] = Field(min_length=1)
    wind: SecondaryWind


class SecondaryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entries: list[SecondaryEntry] = Field(alias="list")
