"""
Station Catalog Service

Administrative add/update/delete of station records. Every change is written
through the data repository and then published as a brand-new station
directory snapshot; existing snapshots are never modified.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional

from ..interfaces.i_data_repository import IDataRepository
from ..models.station import Station
from .station_directory import StationDirectory, DEFAULT_INTERCHANGE_STATIONS
from .station_validator import (
    next_station_id,
    validate_station_id,
    validate_station_line,
    validate_station_name,
    validate_unique_station,
)


class StationCatalogError(Exception):
    """Raised when a catalog change refers to a station that does not exist."""

    pass


class StationCatalogService:
    """Service for editing the persisted station catalog."""

    def __init__(self, data_repository: IDataRepository,
                 publish: Optional[Callable[[StationDirectory], None]] = None,
                 interchange_names: Iterable[str] = DEFAULT_INTERCHANGE_STATIONS):
        """
        Initialize the catalog service.

        Args:
            data_repository: Repository the catalog is read from and written to
            publish: Called with the new snapshot after each successful change
            interchange_names: Interchanges carried into new snapshots
        """
        self.data_repository = data_repository
        self.publish = publish
        self.interchange_names = tuple(interchange_names)
        self.logger = logging.getLogger(__name__)

    def add_station(self, name: str, line: str,
                    has_parking: bool = False, has_feeder: bool = False,
                    position: Optional[int] = None,
                    station_id: Optional[str] = None) -> Station:
        """
        Add a station to a line.

        Args:
            name: Display name, unique across the network
            line: Line tag
            has_parking: Parking available
            has_feeder: Feeder service available
            position: Index on the line to insert at; appended when None
            station_id: Line-prefixed id such as "B27"; the next free id on
                the line when None

        Returns:
            The new Station

        Raises:
            StationValidationError: If id, name or line are invalid or taken
        """
        metro_line = validate_station_line(line)
        if station_id is not None:
            station_id = validate_station_id(station_id, metro_line)
        name = validate_station_name(name)

        stations = self.data_repository.load_stations()
        validate_unique_station(name, stations)
        if station_id is None:
            station_id = next_station_id(stations, metro_line)
        if self._find_by_id(stations, station_id) is not None:
            raise StationCatalogError(f"Station id '{station_id}' already exists")

        station = Station(id=station_id, name=name, line=metro_line.value,
                          has_parking=has_parking, has_feeder=has_feeder)

        lines = self._group_by_line(stations)
        line_stations = lines.setdefault(metro_line.value.lower(), [])
        if position is None:
            line_stations.append(station)
        else:
            line_stations.insert(max(0, position), station)

        self._commit(lines)
        self.logger.info(f"Station added: {station.name} ({station.id}, {station.line})")
        return station

    def update_station(self, station_id: str, name: Optional[str] = None,
                       has_parking: Optional[bool] = None,
                       has_feeder: Optional[bool] = None) -> Station:
        """
        Update a station's name or facility flags. Line and position are kept.

        Raises:
            StationCatalogError: If no station has the id
            StationValidationError: If the new name is invalid or taken
        """
        stations = self.data_repository.load_stations()
        current = self._require(stations, station_id)

        changes = {}
        if name is not None:
            name = validate_station_name(name)
            validate_unique_station(name, stations, ignore_id=current.id)
            changes["name"] = name
        if has_parking is not None:
            changes["has_parking"] = has_parking
        if has_feeder is not None:
            changes["has_feeder"] = has_feeder

        updated = replace(current, **changes)
        stations = [updated if s is current else s for s in stations]

        self._commit(self._group_by_line(stations))
        self.logger.info(f"Station updated: {current.id} → {updated.name}")
        return updated

    def delete_station(self, station_id: str) -> Station:
        """
        Remove a station.

        Raises:
            StationCatalogError: If no station has the id
        """
        stations = self.data_repository.load_stations()
        current = self._require(stations, station_id)
        if any(current.matches_name(name) for name in self.interchange_names):
            self.logger.warning(f"Deleting interchange station '{current.name}'")

        remaining = [s for s in stations if s is not current]
        self._commit(self._group_by_line(remaining))
        self.logger.info(f"Station deleted: {current.name} ({current.id})")
        return current

    def _commit(self, lines: Dict[str, List[Station]]) -> StationDirectory:
        """Validate, persist and publish the edited catalog."""
        stations = [station for line_stations in lines.values() for station in line_stations]
        directory = StationDirectory(stations, self.interchange_names)
        self.data_repository.save_stations(stations)
        if self.publish is not None:
            self.publish(directory)
        return directory

    @staticmethod
    def _group_by_line(stations: List[Station]) -> Dict[str, List[Station]]:
        lines: Dict[str, List[Station]] = {}
        for station in stations:
            lines.setdefault(station.line.lower(), []).append(station)
        return lines

    @staticmethod
    def _find_by_id(stations: List[Station], station_id: str) -> Optional[Station]:
        for station in stations:
            if station.id.lower() == station_id.strip().lower():
                return station
        return None

    def _require(self, stations: List[Station], station_id: str) -> Station:
        station = self._find_by_id(stations, station_id or "")
        if station is None:
            self.logger.warning(f"Station id not found: {station_id}")
            raise StationCatalogError(f"No station with id '{station_id}'")
        return station
