"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx
import yaml

from weatherdash.cli import main

WEATHERAPI_URL = "https://api.weatherapi.com/v1/forecast.json"
OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/forecast"


def _write_config(tmp_path: Path, **display) -> Path:
    data = {"geolocation": {"provider": "disabled"}}
    if display:
        data["display"] = display
    path = tmp_path / "test.yaml"
    path.write_text(yaml.dump(data))
    return path


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    @respx.mock
    def test_show_city(self, tmp_path: Path, capsys, primary_payload, secondary_payload):
        respx.get(WEATHERAPI_URL).mock(
            return_value=httpx.Response(200, json=primary_payload)
        )
        respx.get(OPENWEATHER_URL).mock(
            return_value=httpx.Response(200, json=secondary_payload)
        )
        config_path = _write_config(tmp_path)

        result = main(["--config", str(config_path), "show", "--city", "London"])

        assert result == 0
        out = capsys.readouterr().out
        assert "London: Partly cloudy" in out
        assert "°C" in out

    @respx.mock
    def test_show_defaults_to_london_without_geolocation(
        self, tmp_path: Path, capsys, primary_payload, secondary_payload
    ):
        primary = respx.get(WEATHERAPI_URL).mock(
            return_value=httpx.Response(200, json=primary_payload)
        )
        secondary = respx.get(OPENWEATHER_URL).mock(
            return_value=httpx.Response(200, json=secondary_payload)
        )
        config_path = _write_config(tmp_path)

        result = main(["--config", str(config_path), "show", "--units", "imperial", "--json"])

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["units"] == "imperial"
        assert data["view_model"]["current"]["temperature"] == 64.4
        assert primary.calls.last.request.url.params["q"] == "London"
        assert secondary.calls.last.request.url.params["units"] == "imperial"

    @respx.mock
    def test_show_upstream_failure(self, tmp_path: Path, capsys, primary_payload):
        respx.get(WEATHERAPI_URL).mock(
            return_value=httpx.Response(200, json=primary_payload)
        )
        respx.get(OPENWEATHER_URL).mock(return_value=httpx.Response(401))
        config_path = _write_config(tmp_path)

        result = main(["--config", str(config_path), "show", "--city", "London"])

        assert result == 1
        assert "Error fetching the weather data" in capsys.readouterr().out

    def test_config_show_masks_keys(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.setenv("WEATHERAPI_KEY", "super-secret")
        config_path = _write_config(tmp_path)
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        out = capsys.readouterr().out
        assert "super-secret" not in out
        assert "****" in out
        assert '"provider": "disabled"' in out

    def test_config_set(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main([
            "--config", str(config_path),
            "config", "set", "display.default_city=Berlin",
        ])
        assert result == 0
        assert "Berlin" in capsys.readouterr().out

    def test_config_set_invalid(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main([
            "--config", str(config_path),
            "config", "set", "display.units=kelvin",
        ])
        assert result == 1
        assert "Error" in capsys.readouterr().out

    def test_config_set_needs_equals(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main(["--config", str(config_path), "config", "set", "display.units"])
        assert result == 1
