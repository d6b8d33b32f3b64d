"""Tests for shared model types."""

import pytest

from weatherdash.models.common import (
    Coordinates,
    LocationQuery,
    UnitSystem,
    temperature_label,
    wind_speed_label,
)
from weatherdash.models.weather import DashboardViewModel


class TestLocationQuery:
    def test_city(self):
        q = LocationQuery.for_city("Lisbon")
        assert q.city == "Lisbon"
        assert q.coordinates is None
        assert str(q) == "Lisbon"

    def test_coordinates(self):
        q = LocationQuery.for_coordinates(38.72, -9.14)
        assert q.coordinates == Coordinates(38.72, -9.14)
        assert str(q) == "38.72,-9.14"

    def test_requires_exactly_one(self):
        with pytest.raises(ValueError):
            LocationQuery()
        with pytest.raises(ValueError):
            LocationQuery(city="Lisbon", coordinates=Coordinates(0.0, 0.0))


class TestLabels:
    def test_temperature(self):
        assert temperature_label(UnitSystem.METRIC) == "°C"
        assert temperature_label(UnitSystem.IMPERIAL) == "°F"

    def test_wind_speed(self):
        assert wind_speed_label(UnitSystem.METRIC) == "m/s"
        assert wind_speed_label(UnitSystem.IMPERIAL) == "mph"

    def test_view_model_labels(self):
        vm = DashboardViewModel(units=UnitSystem.IMPERIAL)
        assert vm.temperature_unit == "°F"
        assert vm.wind_speed_unit == "mph"
        assert not vm.is_complete
