"""Output formatters for the dashboard state."""

import json
from dataclasses import asdict

from weatherdash.models.weather import DashboardViewModel
from weatherdash.pipeline.state import DashboardState


def format_dashboard_text(s: DashboardState) -> str:
    """Plain text dashboard for terminals and the HTML fallback page."""
    vm = s.view_model
    lines = [f"=== Weather Dashboard ({s.units}, {s.theme} theme) ==="]
    if s.loading:
        lines.append("Loading...")
    if s.error:
        lines.append(f"Error: {s.error}")
    if vm is None:
        if not s.loading and not s.error:
            lines.append("No data yet")
        return "\n".join(lines)

    t = vm.temperature_unit
    if vm.current is not None:
        c = vm.current
        aqi = c.air_quality_index if c.air_quality_index is not None else "n/a"
        dew = f"{c.dew_point} {t}" if c.dew_point is not None else "n/a"
        lines += [
            "",
            f"{c.location.name}: {c.description}",
            f"Temperature: {c.temperature} {t} | Feels like: {c.feels_like} {t}",
            f"Humidity: {c.humidity_pct} % | Dew point: {dew}",
            f"Wind: {c.wind_speed_kph} kph {c.wind_direction} | "
            f"Pressure: {c.pressure_mb} mb",
            f"Visibility: {c.visibility_km} km | UV index: {c.uv_index} | "
            f"Air quality: {aqi}",
            f"Precipitation: {c.precipitation_mm} mm",
            f"Sunrise: {c.sunrise} | Sunset: {c.sunset}",
        ]
    if vm.hourly is not None:
        lines += ["", "24-Hour Forecast"]
        for h in vm.hourly:
            lines.append(
                f"  {h.timestamp[-5:]}  {h.temperature:>6} {t}  "
                f"{h.precipitation_mm} mm  {h.description}"
            )
    if vm.daily is not None:
        lines += ["", "5-Day Forecast"]
        if not vm.daily:
            lines.append("  (no midday forecasts)")
        for d in vm.daily:
            lines.append(
                f"  {d.date}  {d.temperature} {t}  {d.humidity_pct} %  "
                f"{d.wind_speed} {vm.wind_speed_unit} @ {d.wind_direction_deg}°  "
                f"{d.pressure_mb} mb  {d.description}"
            )
    return "\n".join(lines)


def view_model_dict(vm: DashboardViewModel) -> dict:
    data = asdict(vm)
    data["temperature_unit"] = vm.temperature_unit
    data["wind_speed_unit"] = vm.wind_speed_unit
    return data


def state_dict(s: DashboardState) -> dict:
    return {
        "phase": s.phase.value,
        "loading": s.loading,
        "error": s.error,
        "units": s.units.value,
        "theme": s.theme.value,
        "city_query": s.city_query,
        "request_token": s.request_token,
        "view_model": view_model_dict(s.view_model) if s.view_model else None,
    }


def format_dashboard_json(s: DashboardState) -> str:
    """JSON dashboard for programmatic consumption."""
    return json.dumps(state_dict(s), indent=2, ensure_ascii=False)
