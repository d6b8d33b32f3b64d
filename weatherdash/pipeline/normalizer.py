"""Forecast normalizer: merges both raw API payloads into one view model."""

import logging

from weatherdash.models.common import UnitSystem
from weatherdash.models.payloads import (
    PrimaryPayload,
    SecondaryEntry,
    SecondaryPayload,
)
from weatherdash.models.weather import (
    CurrentConditions,
    DailySlot,
    DashboardViewModel,
    HourlySlot,
    Location,
)

logger = logging.getLogger(__name__)

NOON_MARKER = "12:00:00"
MAX_DAILY_SLOTS = 5
OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn/{icon}.png"


def normalize(
    primary_raw: dict | None,
    secondary_raw: dict | None,
    units: UnitSystem,
) -> DashboardViewModel:
    """Build the dashboard view model from whichever payloads are present.

    A missing payload only blanks the sections that depend on it.
    """
    current: CurrentConditions | None = None
    hourly: list[HourlySlot] | None = None
    daily: list[DailySlot] | None = None

    if primary_raw is not None:
        primary = PrimaryPayload.model_validate(primary_raw)
        current = _build_current(primary, units)
        hourly = _build_hourly(primary, units)

    if secondary_raw is not None:
        secondary = SecondaryPayload.model_validate(secondary_raw)
        daily = _build_daily(secondary)

    return DashboardViewModel(units=units, current=current, hourly=hourly, daily=daily)


def _build_current(primary: PrimaryPayload, units: UnitSystem) -> CurrentConditions:
    cur = primary.current
    today = primary.forecast.forecastday[0]
    metric = units == UnitSystem.METRIC
    air_quality = cur.air_quality.us_epa_index if cur.air_quality else None

    return CurrentConditions(
        location=Location(
            name=primary.location.name,
            latitude=primary.location.lat,
            longitude=primary.location.lon,
        ),
        description=cur.condition.text,
        icon_ref=cur.condition.icon,
        temperature=cur.temp_c if metric else cur.temp_f,
        feels_like=cur.feelslike_c if metric else cur.feelslike_f,
        humidity_pct=cur.humidity,
        wind_speed_kph=cur.wind_kph,
        wind_direction=cur.wind_dir,
        pressure_mb=cur.pressure_mb,
        visibility_km=cur.vis_km,
        uv_index=cur.uv,
        air_quality_index=air_quality,
        sunrise=today.astro.sunrise,
        sunset=today.astro.sunset,
        precipitation_mm=cur.precip_mm,
        dew_point=cur.dewpoint_c if metric else cur.dewpoint_f,
    )


def _build_hourly(primary: PrimaryPayload, units: UnitSystem) -> list[HourlySlot]:
    metric = units == UnitSystem.METRIC
    return [
        HourlySlot(
            timestamp=h.time,
            icon_ref=h.condition.icon,
            description=h.condition.text,
            temperature=h.temp_c if metric else h.temp_f,
            precipitation_mm=h.precip_mm,
        )
        for h in primary.forecast.forecastday[0].hour
    ]


def _build_daily(secondary: SecondaryPayload) -> list[DailySlot]:
    """One slot per day: the entry stamped exactly at noon.

    Days without a "12:00:00" entry are dropped.
    """
    noon = [e for e in secondary.entries if is_noon_slot(e)]
    if len(noon) > MAX_DAILY_SLOTS:
        logger.debug("Trimming %d noon entries to %d", len(noon), MAX_DAILY_SLOTS)
    return [_daily_slot(e) for e in noon[:MAX_DAILY_SLOTS]]


def is_noon_slot(entry: SecondaryEntry) -> bool:
    return NOON_MARKER in entry.dt_txt


def _daily_slot(entry: SecondaryEntry) -> DailySlot:
    weather = entry.weather[0]
    return DailySlot(
        date=entry.dt_txt[:10],
        timestamp=entry.dt,
        icon_ref=OPENWEATHER_ICON_URL.format(icon=weather.icon),
        description=weather.description,
        temperature=entry.main.temp,
        humidity_pct=entry.main.humidity,
        wind_speed=entry.wind.speed,
        wind_direction_deg=entry.wind.deg,
        pressure_mb=entry.main.pressure,
    )
