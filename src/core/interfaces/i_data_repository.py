"""
Data Repository Interface

Interface for loading and persisting station and fare data.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any
from ..models.station import Station
from ..models.fare_rule import FareRule


class IDataRepository(ABC):
    """Interface for data repository operations."""

    @abstractmethod
    def load_stations(self) -> List[Station]:
        """
        Load all stations from the data source, grouped by line in line order.

        Returns:
            List of Station objects

        Raises:
            DataRepositoryError: If the station data cannot be read
        """
        pass

    @abstractmethod
    def load_fare_rules(self) -> List[FareRule]:
        """
        Load fare rules in declared order.

        Returns:
            List of FareRule objects, empty if the data cannot be read
        """
        pass

    @abstractmethod
    def save_stations(self, stations: List[Station]) -> None:
        """
        Persist the full station catalog, replacing what is stored.

        Args:
            stations: Stations in line order

        Raises:
            DataRepositoryError: If the data cannot be written
        """
        pass

    @abstractmethod
    def get_data_source_info(self) -> Dict[str, Any]:
        """
        Get information about where data is loaded from.

        Returns:
            Dictionary with data source details
        """
        pass
