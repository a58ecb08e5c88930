"""
Global pytest configuration and fixtures.
"""

import json
import shutil
import pytest
from pathlib import Path
from src.core.models.station import Station
from src.core.models.fare_rule import FareRule
from src.core.services.station_directory import StationDirectory
from src.core.services.fare_service import FareTable
from src.core.services.time_estimator import TravelTimeEstimator
from src.core.services.journey_planner import JourneyPlanner
from src.managers.config_manager import ConfigData, DataConfig, LoggingConfig

BUNDLED_DATA_DIR = Path(__file__).parent.parent / "src" / "data"


def make_line(line, prefix, names):
    """Build the stations of one line in order."""
    return [Station(id=f"{prefix}{i}", name=name, line=line) for i, name in enumerate(names, start=1)]


@pytest.fixture
def blue_line():
    """Blue line with both interchanges."""
    return make_line("Blue", "B", [
        "Airport", "Meenambakkam", "Alandur", "Guindy", "Saidapet",
        "Teynampet", "Chennai Central", "High Court", "Washermenpet",
    ])


@pytest.fixture
def green_line():
    """Green line joining the blue line at both interchanges."""
    return make_line("Green", "G", [
        "Chennai Central", "Egmore", "Kilpauk", "Koyambedu",
        "Vadapalani", "Alandur", "St Thomas Mount",
    ])


@pytest.fixture
def network(blue_line, green_line):
    """All stations of the test network, blue line first."""
    return blue_line + green_line


@pytest.fixture
def directory(network):
    """Directory snapshot of the test network."""
    return StationDirectory(network, ("Chennai Central", "Alandur"))


@pytest.fixture
def fare_rules():
    """Gapless fare rules up to 40 stops."""
    return [
        FareRule(0, 2, 10),
        FareRule(3, 5, 20),
        FareRule(6, 12, 30),
        FareRule(13, 18, 40),
        FareRule(19, 40, 50),
    ]


@pytest.fixture
def fare_table(fare_rules):
    return FareTable(fare_rules)


@pytest.fixture
def planner(directory, fare_table):
    """Journey planner over the test network."""
    return JourneyPlanner(directory, fare_table, TravelTimeEstimator())


@pytest.fixture
def data_dir(tmp_path, network, fare_rules):
    """Temporary data directory holding the test network as JSON files."""
    stations = {
        "blueLineStations": [s.to_dict() for s in network if s.line == "Blue"],
        "greenLineStations": [s.to_dict() for s in network if s.line == "Green"],
    }
    (tmp_path / "stations.json").write_text(json.dumps(stations, indent=2), encoding="utf-8")
    (tmp_path / "fareRules.json").write_text(
        json.dumps([rule.to_dict() for rule in fare_rules], indent=2), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def test_config(data_dir):
    """Configuration pointing at the temporary data directory."""
    return ConfigData(data=DataConfig(data_directory=str(data_dir)))


@pytest.fixture
def build_line():
    """Factory fixture building one line's stations from names."""
    return make_line


@pytest.fixture
def bundled_config():
    """Configuration using the bundled data files, logging to the console only."""
    return ConfigData(
        data=DataConfig(data_directory=str(BUNDLED_DATA_DIR)),
        logging=LoggingConfig(log_to_file=False),
    )


@pytest.fixture
def bundled_data_copy(tmp_path):
    """Writable copy of the bundled data files."""
    for file_name in ("stations.json", "fareRules.json"):
        shutil.copy(BUNDLED_DATA_DIR / file_name, tmp_path / file_name)
    return tmp_path
