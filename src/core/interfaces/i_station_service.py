"""
Station Service Interface

Defines the read-only contract of a station directory.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..models.station import Station


class IStationService(ABC):
    """Interface for read-only station lookups."""

    @abstractmethod
    def get_all_stations(self) -> List[Station]:
        """
        Get all stations, each line's stations in line order.

        Returns:
            List of all station objects
        """
        pass

    @abstractmethod
    def get_station_by_name(self, name: str) -> Optional[Station]:
        """
        Get station object by name (case-insensitive).

        Args:
            name: Station name

        Returns:
            Station object or None if not found
        """
        pass

    @abstractmethod
    def get_station_by_id(self, station_id: str) -> Optional[Station]:
        """
        Get station object by id (case-insensitive).

        Args:
            station_id: Station id such as "B1"

        Returns:
            Station object or None if not found
        """
        pass

    @abstractmethod
    def get_stations_on_line(self, line_name: str) -> List[Station]:
        """
        Get all stations on a line, in line order.

        Args:
            line_name: Line tag, compared case-insensitively

        Returns:
            List of stations on the line
        """
        pass

    @abstractmethod
    def get_line_names(self) -> List[str]:
        """
        Get the line tags present in the directory, in first-seen order.

        Returns:
            List of line tags
        """
        pass

    @abstractmethod
    def get_interchange_names(self) -> Tuple[str, ...]:
        """
        Get the configured interchange station names, in priority order.

        Returns:
            Tuple of interchange station names
        """
        pass
