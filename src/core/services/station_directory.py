"""
Station Directory

Immutable snapshot of the station catalog plus the interchange names that
join its lines. Built once from the data repository and shared read-only.
"""

import logging
from typing import Iterable, List, Optional, Set, Tuple, Dict

from ..interfaces.i_station_service import IStationService
from ..models.station import Station

DEFAULT_INTERCHANGE_STATIONS: Tuple[str, ...] = ("Chennai Central", "Alandur")


class StationDirectory(IStationService):
    """Read-only station catalog."""

    def __init__(self, stations: Iterable[Station],
                 interchange_names: Iterable[str] = DEFAULT_INTERCHANGE_STATIONS):
        """
        Build a directory snapshot.

        Args:
            stations: Stations grouped by line, each line in physical order
            interchange_names: Names of stations where riders may change line,
                in tie-break priority order

        Raises:
            ValueError: If two stations share an id, or a name is listed
                twice on the same line
        """
        self.logger = logging.getLogger(__name__)
        self._stations: Tuple[Station, ...] = tuple(stations)
        self._interchange_names: Tuple[str, ...] = tuple(
            name.strip() for name in interchange_names if name and name.strip()
        )

        self._by_name: Dict[str, Station] = {}
        self._by_id: Dict[str, Station] = {}
        seen: Set[Tuple[str, str]] = set()
        for station in self._stations:
            # a name may recur on another line; only configured interchanges are routed through
            line_name_key = (station.line.lower(), station.name.lower())
            id_key = station.id.lower()
            if line_name_key in seen:
                raise ValueError(
                    f"Duplicate station name on line {station.line}: '{station.name}'"
                )
            if id_key in self._by_id:
                raise ValueError(f"Duplicate station id: '{station.id}'")
            seen.add(line_name_key)
            self._by_name.setdefault(station.name.lower(), station)
            self._by_id[id_key] = station

        self._lines: Dict[str, Tuple[Station, ...]] = {}
        for line_name in self._collect_line_names():
            self._lines[line_name.lower()] = tuple(
                s for s in self._stations if s.is_on_line(line_name)
            )

        missing = [name for name in self._interchange_names if name.lower() not in self._by_name]
        if missing:
            self.logger.warning(f"Configured interchange stations not in directory: {missing}")

        self.logger.debug(
            f"Built StationDirectory with {len(self._stations)} stations "
            f"on {len(self._lines)} lines"
        )

    def _collect_line_names(self) -> List[str]:
        seen: Dict[str, str] = {}
        for station in self._stations:
            seen.setdefault(station.line.lower(), station.line)
        return list(seen.values())

    def get_all_stations(self) -> List[Station]:
        """Get all stations, each line's stations in line order."""
        return list(self._stations)

    def get_station_by_name(self, name: str) -> Optional[Station]:
        """Get station object by name (case-insensitive); interchanges resolve to their first listing."""
        if not name:
            return None
        return self._by_name.get(name.strip().lower())

    def get_station_by_id(self, station_id: str) -> Optional[Station]:
        """Get station object by id (case-insensitive)."""
        if not station_id:
            return None
        return self._by_id.get(station_id.strip().lower())

    def get_stations_on_line(self, line_name: str) -> List[Station]:
        """Get all stations on a line, in line order."""
        return list(self._lines.get(line_name.lower(), ()))

    def get_line_names(self) -> List[str]:
        """Get the line tags present in the directory."""
        return self._collect_line_names()

    def get_interchange_names(self) -> Tuple[str, ...]:
        """Get the configured interchange station names."""
        return self._interchange_names

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, station: object) -> bool:
        if not isinstance(station, Station):
            return False
        return station in self._stations

    def get_statistics(self) -> Dict[str, int]:
        """Station counts per line."""
        stats = {"total_stations": len(self._stations)}
        for line_name in self.get_line_names():
            stats[f"{line_name.lower()}_line_stations"] = len(self.get_stations_on_line(line_name))
        return stats
