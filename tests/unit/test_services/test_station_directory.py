"""
Unit tests for StationDirectory.
"""

import logging
import pytest

from src.core.models.station import Station
from src.core.services.station_directory import StationDirectory, DEFAULT_INTERCHANGE_STATIONS


class TestStationDirectoryLookups:
    """Lookups on a directory snapshot."""

    def test_get_all_stations_keeps_order(self, directory, network):
        assert directory.get_all_stations() == network
        assert len(directory) == 16

    def test_get_station_by_name_ignores_case(self, directory):
        station = directory.get_station_by_name("  guindy ")

        assert station.id == "B4"

    def test_interchange_resolves_to_first_listing(self, directory):
        assert directory.get_station_by_name("Chennai Central").id == "B7"
        assert directory.get_station_by_name("Alandur").id == "B3"

    def test_get_station_by_name_unknown(self, directory):
        assert directory.get_station_by_name("Tambaram") is None
        assert directory.get_station_by_name("") is None

    def test_get_station_by_id(self, directory):
        assert directory.get_station_by_id("g6").name == "Alandur"
        assert directory.get_station_by_id("B99") is None

    def test_get_stations_on_line(self, directory):
        green = directory.get_stations_on_line("GREEN")

        assert [s.id for s in green] == [f"G{i}" for i in range(1, 8)]
        assert directory.get_stations_on_line("Red") == []

    def test_get_line_names(self, directory):
        assert directory.get_line_names() == ["Blue", "Green"]

    def test_interchanges(self, directory):
        assert directory.get_interchange_names() == ("Chennai Central", "Alandur")

    def test_contains(self, directory, blue_line):
        assert blue_line[0] in directory
        assert Station("B99", "Tambaram", "Blue") not in directory
        assert "Airport" not in directory

    def test_get_statistics(self, directory):
        assert directory.get_statistics() == {
            "total_stations": 16,
            "blue_line_stations": 9,
            "green_line_stations": 7,
        }


class TestStationDirectoryConstruction:
    """Validation performed while building a snapshot."""

    def test_default_interchanges(self, network):
        assert StationDirectory(network).get_interchange_names() == DEFAULT_INTERCHANGE_STATIONS

    def test_blank_interchange_names_dropped(self, network):
        directory = StationDirectory(network, [" Alandur ", "", "  "])

        assert directory.get_interchange_names() == ("Alandur",)
        assert directory.get_station_by_name("Chennai Central").id == "B7"

    def test_no_interchanges_configured(self, network):
        directory = StationDirectory(network, [])

        assert len(directory) == 16
        assert directory.get_interchange_names() == ()

    def test_duplicate_name_rejected(self, build_line):
        stations = build_line("Blue", "B", ["Airport", "Guindy", "airport"])

        with pytest.raises(ValueError, match="Duplicate station name on line Blue"):
            StationDirectory(stations)

    def test_name_shared_across_lines_allowed(self, build_line):
        stations = build_line("Blue", "B", ["Airport", "Guindy"]) + build_line("Green", "G", ["Guindy"])

        directory = StationDirectory(stations, ["Alandur"])

        assert directory.get_station_by_name("Guindy").id == "B2"
        assert directory.get_station_by_id("G1").name == "Guindy"

    def test_interchange_listed_twice_on_one_line_rejected(self, build_line):
        stations = build_line("Blue", "B", ["Alandur", "Guindy", "Alandur"])

        with pytest.raises(ValueError, match="Duplicate station name"):
            StationDirectory(stations, ["Alandur"])

    def test_duplicate_id_rejected(self):
        stations = [Station("B1", "Airport", "Blue"), Station("b1", "Guindy", "Blue")]

        with pytest.raises(ValueError, match="Duplicate station id"):
            StationDirectory(stations)

    def test_missing_interchange_logged(self, blue_line, caplog):
        with caplog.at_level(logging.WARNING):
            StationDirectory(blue_line, ["Alandur", "Koyambedu"])

        assert "Koyambedu" in caplog.text
