"""
JSON Data Repository Implementation

Repository implementation for loading stations and fare rules from JSON files.
"""

import json
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any

from ..interfaces.i_data_repository import IDataRepository
from ..models.station import Station
from ..models.fare_rule import FareRule
from ..models.metro_line import MetroLine
from ...utils.data_path_resolver import get_data_directory

STATIONS_FILE = "stations.json"
FARE_RULES_FILE = "fareRules.json"
LINE_KEY_SUFFIX = "LineStations"


class DataRepositoryError(Exception):
    """Raised when station data cannot be read or written."""

    pass


class JsonDataRepository(IDataRepository):
    """Repository implementation for JSON-based metro data."""

    def __init__(self, data_directory: Optional[str] = None,
                 stations_file: str = STATIONS_FILE,
                 fare_rules_file: str = FARE_RULES_FILE):
        """
        Initialize the JSON data repository.

        Args:
            data_directory: Path to directory containing the JSON data files
            stations_file: File name of the station catalog
            fare_rules_file: File name of the fare rules
        """
        if data_directory is None:
            self.data_directory = get_data_directory()
        else:
            self.data_directory = Path(data_directory)

        self.stations_path = self.data_directory / stations_file
        self.fare_rules_path = self.data_directory / fare_rules_file
        self.logger = logging.getLogger(__name__)
        self._last_loaded: Optional[datetime] = None

        self.logger.info(f"Initialized JsonDataRepository with data directory: {self.data_directory}")

    def load_stations(self) -> List[Station]:
        """Load all stations, line by line in file order."""
        self.logger.info(f"Loading stations from JSON file: {self.stations_path}")

        try:
            with open(self.stations_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"MALFORMED JSON in {self.stations_path.name}: line {e.lineno}, column {e.colno}")
            raise DataRepositoryError(f"Invalid JSON in station file: {e}")
        except OSError as e:
            self.logger.error(f"Failed to load stations: {e}")
            raise DataRepositoryError(f"Failed to read station file: {e}")

        if not isinstance(data, dict):
            raise DataRepositoryError("Station file must contain an object of line station lists")

        stations = []
        for key, records in data.items():
            if not key.endswith(LINE_KEY_SUFFIX):
                self.logger.debug(f"Ignoring unknown key in station file: {key}")
                continue
            if not isinstance(records, list):
                raise DataRepositoryError(f"'{key}' must be a list of stations")
            stations.extend(self._parse_line(key, records))

        self._last_loaded = datetime.now()
        self.logger.info(f"Loaded {len(stations)} stations successfully")
        return stations

    def _parse_line(self, key: str, records: List[Dict[str, Any]]) -> List[Station]:
        """Parse one line's station records, defaulting the line tag from the key."""
        known_line = MetroLine.from_json_key(key)
        default_line = known_line.value if known_line else key[:-len(LINE_KEY_SUFFIX)].capitalize()

        stations = []
        for record in records:
            try:
                record = dict(record)
                record.setdefault("line", default_line)
                stations.append(Station.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                self.logger.error(f"Invalid station record in '{key}': {record} ({e})")
                raise DataRepositoryError(f"Invalid station record in '{key}': {e}")
        self.logger.debug(f"Parsed {len(stations)} stations from '{key}'")
        return stations

    def load_fare_rules(self) -> List[FareRule]:
        """Load fare rules in declared order; any failure yields an empty list."""
        try:
            with open(self.fare_rules_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            rules = [FareRule.from_dict(record) for record in data]
        except json.JSONDecodeError as e:
            self.logger.error(
                f"MALFORMED JSON in {self.fare_rules_path.name}: line {e.lineno}, column {e.colno}"
            )
            return []
        except (OSError, KeyError, TypeError, ValueError) as e:
            self.logger.error(f"Failed to load fare rules from '{self.fare_rules_path}': {e}")
            return []

        self.logger.info(f"Fare rules loaded successfully. Total rules: {len(rules)}")
        return rules

    def save_stations(self, stations: List[Station]) -> None:
        """Write the station catalog, keeping a .backup of the previous file."""
        data: Dict[str, List[Dict[str, Any]]] = {}
        for line in MetroLine:
            data[line.json_key] = []
        for station in stations:
            known_line = MetroLine.from_tag(station.line)
            key = known_line.json_key if known_line else f"{station.line.lower()}{LINE_KEY_SUFFIX}"
            data.setdefault(key, []).append(station.to_dict())

        try:
            self.data_directory.mkdir(parents=True, exist_ok=True)
            if self.stations_path.exists():
                shutil.copy2(self.stations_path, self.stations_path.with_name(self.stations_path.name + ".backup"))
            with open(self.stations_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            self.logger.error(f"Failed to save stations data: {e}")
            raise DataRepositoryError(f"Failed to write station file: {e}")

        self.logger.info(f"Stations data saved successfully. Total stations: {len(stations)}")

    def get_data_source_info(self) -> Dict[str, Any]:
        """Get information about the JSON data source."""
        return {
            "data_directory": str(self.data_directory),
            "stations_file": str(self.stations_path),
            "fare_rules_file": str(self.fare_rules_path),
            "stations_file_exists": self.stations_path.exists(),
            "fare_rules_file_exists": self.fare_rules_path.exists(),
            "last_loaded": self._last_loaded.isoformat() if self._last_loaded else None,
        }
