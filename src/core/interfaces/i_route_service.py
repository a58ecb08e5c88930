"""
Route Service Interface

Interface for resolving the path between two stations.
"""

from abc import ABC, abstractmethod
from typing import Sequence
from ..models.station import Station
from ..models.journey import JourneyResult


class IRouteService(ABC):
    """Interface for route resolution."""

    @abstractmethod
    def resolve(self, stations: Sequence[Station], start: Station, end: Station) -> JourneyResult:
        """
        Resolve the ordered path between two stations.

        Args:
            stations: Every station of the network, each line in line order
            start: Origin station, present in stations
            end: Destination station, present in stations and distinct from start

        Returns:
            JourneyResult; an empty path signals an unreachable journey
        """
        pass
