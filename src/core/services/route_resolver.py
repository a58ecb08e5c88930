"""
Route Resolver

Resolves the ordered path between two stations on a network of linear lines
joined at named interchange stations. At most one change of line is made.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..interfaces.i_route_service import IRouteService
from ..interfaces.i_station_service import IStationService
from ..models.station import Station
from ..models.journey import JourneyResult
from .station_directory import DEFAULT_INTERCHANGE_STATIONS


class RouteResolver(IRouteService):
    """Service implementation for same-line and single-interchange routes."""

    def __init__(self, interchange_names: Iterable[str] = DEFAULT_INTERCHANGE_STATIONS):
        """
        Initialize the route resolver.

        Args:
            interchange_names: Stations where a rider may change line. Order
                breaks ties when two interchanges are equally close.
        """
        self.interchange_names = tuple(interchange_names)
        self.logger = logging.getLogger(__name__)

    @classmethod
    def for_directory(cls, directory: IStationService) -> 'RouteResolver':
        """Create a resolver using the interchanges owned by a station directory."""
        return cls(directory.get_interchange_names())

    def resolve(self, stations: Sequence[Station], start: Station, end: Station) -> JourneyResult:
        """Resolve the ordered path between two stations."""
        self.logger.info(
            f"Calculating journey from '{start.name}' (Line: {start.line}) "
            f"to '{end.name}' (Line: {end.line})"
        )

        start_line = self._get_line(stations, start.line)

        if start.is_on_line(end.line):
            self.logger.debug(f"Journey is on the same line: {start.line}")
            result = JourneyResult.from_path(self._get_segment(start_line, start, end))
            self.logger.info(f"Journey calculated with {result.stops} stops, no interchange")
            return result

        self.logger.debug(f"Journey changes line from '{start.line}' to '{end.line}'")
        end_line = self._get_line(stations, end.line)

        interchange = self._find_nearest_interchange(start_line, start)
        if interchange is None:
            self.logger.warning(f"No interchange reachable from '{start.name}' on line {start.line}")
            return JourneyResult.unreachable()
        self.logger.debug(f"Nearest interchange station: {interchange}")

        start_interchange = self._find_station(start_line, interchange)
        end_interchange = self._find_station(end_line, interchange)
        if start_interchange is None or end_interchange is None:
            self.logger.warning(
                f"Interchange '{interchange}' missing on line "
                f"{start.line if start_interchange is None else end.line}"
            )
            return JourneyResult.unreachable()

        path = self._get_segment(start_line, start, start_interchange)
        # interchange already closes the first leg
        path.extend(self._get_segment(end_line, end_interchange, end)[1:])

        result = JourneyResult.from_path(path, interchange)
        self.logger.info(
            f"Journey calculated with {result.stops} stops, interchange: {interchange}"
        )
        return result

    @staticmethod
    def _get_line(stations: Sequence[Station], line_name: str) -> List[Station]:
        """Stations carrying the line tag, in catalog order."""
        return [station for station in stations if station.is_on_line(line_name)]

    def _find_nearest_interchange(self, line_stations: List[Station], start: Station) -> Optional[str]:
        """Interchange name closest to start by index distance; first listed wins ties."""
        start_index = self._find_index(line_stations, start.name)
        if start_index == -1:
            return None

        nearest: Optional[str] = None
        nearest_distance = 0
        for name in self.interchange_names:
            index = self._find_index(line_stations, name)
            if index == -1:
                continue
            distance = abs(index - start_index)
            if nearest is None or distance < nearest_distance:
                nearest, nearest_distance = name, distance
        return nearest

    def _get_segment(self, line_stations: List[Station], start: Station, end: Station) -> List[Station]:
        """Inclusive slice of a line from start to end, reversed when travelling backwards."""
        start_index = self._find_index(line_stations, start.name)
        end_index = self._find_index(line_stations, end.name)
        if start_index == -1 or end_index == -1:
            return []

        if start_index <= end_index:
            segment = line_stations[start_index:end_index + 1]
        else:
            segment = line_stations[end_index:start_index + 1][::-1]

        self.logger.debug(f"Line segment from '{start.name}' to '{end.name}' with {len(segment)} stations")
        return segment

    @staticmethod
    def _find_index(line_stations: List[Station], name: str) -> int:
        for index, station in enumerate(line_stations):
            if station.matches_name(name):
                return index
        return -1

    @staticmethod
    def _find_station(line_stations: List[Station], name: str) -> Optional[Station]:
        for station in line_stations:
            if station.matches_name(name):
                return station
        return None


def resolve_journey(directory: IStationService, start: Station, end: Station) -> JourneyResult:
    """Resolve a journey against a directory snapshot and its interchanges."""
    return RouteResolver.for_directory(directory).resolve(directory.get_all_stations(), start, end)
