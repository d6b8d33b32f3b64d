"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import DashboardConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def primary_payload() -> dict:
    """weatherapi.com forecast.json for London, 24 hourly entries."""
    return load_fixture("weatherapi_forecast_london.json")


@pytest.fixture
def secondary_payload() -> dict:
    """OpenWeatherMap 5 day / 3 hour forecast for London, 40 entries."""
    return load_fixture("openweather_forecast_london.json")


@pytest.fixture
def default_config() -> DashboardConfig:
    return DashboardConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "weatherapi": {"api_key": "wa-test"},
        "openweather": {"api_key": "ow-test"},
        "display": {"units": "imperial", "default_city": "Paris"},
        "geolocation": {"provider": "disabled"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
