"""
Tests for the Station and MetroLine models.
"""

import pytest
from dataclasses import FrozenInstanceError

from src.core.models.station import Station
from src.core.models.metro_line import MetroLine


class TestStation:
    """Test cases for Station."""

    def test_station_creation(self):
        """Test station creation with all fields."""
        station = Station("B13", "Chennai Central", "Blue", has_parking=True, has_feeder=True)

        assert station.id == "B13"
        assert station.name == "Chennai Central"
        assert station.line == "Blue"
        assert station.has_parking is True
        assert station.has_feeder is True

    def test_station_defaults(self):
        station = Station("G2", "Egmore", "Green")

        assert station.has_parking is False
        assert station.has_feeder is False

    @pytest.mark.parametrize("kwargs, message", [
        ({"id": "B1", "name": "", "line": "Blue"}, "name cannot be empty"),
        ({"id": "B1", "name": "   ", "line": "Blue"}, "name cannot be empty"),
        ({"id": "", "name": "Guindy", "line": "Blue"}, "id cannot be empty"),
        ({"id": "B1", "name": "Guindy", "line": ""}, "line cannot be empty"),
    ])
    def test_station_validation(self, kwargs, message):
        """Test that empty fields are rejected."""
        with pytest.raises(ValueError, match=message):
            Station(**kwargs)

    @pytest.mark.parametrize("field_name", ["id", "name", "line"])
    def test_non_string_fields_rejected(self, field_name):
        """Test that numeric ids, names or lines from JSON are rejected."""
        kwargs = {"id": "B1", "name": "Guindy", "line": "Blue", field_name: 7}

        with pytest.raises(TypeError, match=f"Station {field_name} must be a string"):
            Station(**kwargs)

    def test_station_is_immutable(self):
        station = Station("B1", "Airport", "Blue")
        with pytest.raises(FrozenInstanceError):
            station.name = "Changed"

    def test_line_and_name_matching_ignore_case(self):
        station = Station("B4", "Guindy", "Blue")

        assert station.is_on_line("BLUE")
        assert not station.is_on_line("Green")
        assert station.matches_name("guindy")
        assert not station.matches_name("Guindy East")

    def test_to_dict_uses_json_keys(self):
        station = Station("G10", "Koyambedu", "Green", has_parking=True)

        assert station.to_dict() == {
            "id": "G10",
            "name": "Koyambedu",
            "line": "Green",
            "hasParking": True,
            "hasFeeder": False,
        }

    def test_from_dict_defaults_missing_flags(self):
        station = Station.from_dict({"id": "B2", "name": "Meenambakkam", "line": "Blue"})

        assert station == Station("B2", "Meenambakkam", "Blue")

    @pytest.mark.parametrize("raw, expected", [
        (True, True), (False, False), ("true", True), ("false", False),
        (" FALSE ", False), ("True", True), (1, True), (0, False), (None, False),
    ])
    def test_from_dict_parses_flags(self, raw, expected):
        station = Station.from_dict({"id": "B2", "name": "Meenambakkam", "line": "Blue",
                                     "hasParking": raw, "hasFeeder": raw})

        assert station.has_parking is expected
        assert station.has_feeder is expected

    @pytest.mark.parametrize("raw", ["no", "", 2, [True]])
    def test_from_dict_rejects_unreadable_flags(self, raw):
        with pytest.raises(ValueError, match="hasParking must be true or false"):
            Station.from_dict({"id": "B2", "name": "Meenambakkam", "line": "Blue", "hasParking": raw})

    def test_from_dict_missing_name(self):
        with pytest.raises(KeyError):
            Station.from_dict({"id": "B2", "line": "Blue"})

    def test_string_representations(self):
        station = Station("B23", "Alandur", "Blue")

        assert str(station) == "Alandur"
        assert repr(station) == "Station(id='B23', name='Alandur', line='Blue')"


class TestMetroLine:
    """Test cases for MetroLine."""

    def test_prefixes_and_keys(self):
        assert MetroLine.BLUE.id_prefix == "B"
        assert MetroLine.GREEN.id_prefix == "G"
        assert MetroLine.BLUE.json_key == "blueLineStations"
        assert MetroLine.GREEN.json_key == "greenLineStations"

    @pytest.mark.parametrize("tag, expected", [
        ("Blue", MetroLine.BLUE),
        ("green", MetroLine.GREEN),
        ("  GREEN ", MetroLine.GREEN),
        ("Red", None),
        ("", None),
    ])
    def test_from_tag(self, tag, expected):
        assert MetroLine.from_tag(tag) is expected

    def test_from_json_key(self):
        assert MetroLine.from_json_key("greenLineStations") is MetroLine.GREEN
        assert MetroLine.from_json_key("redLineStations") is None
