"""
Service Factory

Factory for creating and wiring the journey planner services. The factory
owns the current station directory snapshot and replaces it as a whole when
the catalog changes.
"""

import logging
import threading
from typing import Optional, Dict, Any

from ...managers.config_manager import ConfigData
from ..interfaces.i_data_repository import IDataRepository
from .fare_service import FareTable
from .journey_planner import JourneyPlanner
from .json_data_repository import JsonDataRepository, DataRepositoryError
from .station_catalog_service import StationCatalogService
from .station_directory import StationDirectory
from .ticket_pricing import TicketPricing
from .time_estimator import TravelTimeEstimator


class ServiceFactory:
    """Factory for creating and managing core service instances."""

    def __init__(self, config: Optional[ConfigData] = None,
                 data_repository: Optional[IDataRepository] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration, defaults to ConfigData()
            data_repository: Repository override; a JsonDataRepository built
                from the configuration is used when None
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ConfigData()

        self._data_repository = data_repository
        self._directory: Optional[StationDirectory] = None
        self._fare_table: Optional[FareTable] = None
        self._planner: Optional[JourneyPlanner] = None
        self._lock = threading.Lock()

        self.logger.info("Initialized ServiceFactory")

    def get_data_repository(self) -> IDataRepository:
        """Get or create the data repository instance."""
        if self._data_repository is None:
            self._data_repository = JsonDataRepository(
                self.config.data.data_directory,
                stations_file=self.config.data.stations_file,
                fare_rules_file=self.config.data.fare_rules_file,
            )
            self.logger.info("Created JsonDataRepository instance")

        return self._data_repository

    def get_station_directory(self) -> StationDirectory:
        """Get the current station directory snapshot, loading it on first use."""
        directory = self._directory
        if directory is None:
            with self._lock:
                if self._directory is None:
                    self._directory = self._build_directory()
                directory = self._directory
        return directory

    def get_fare_table(self) -> FareTable:
        """Get the fare table, loading it on first use."""
        if self._fare_table is None:
            with self._lock:
                if self._fare_table is None:
                    self._fare_table = self._build_fare_table()
        return self._fare_table

    def get_time_estimator(self) -> TravelTimeEstimator:
        """Create a travel time estimator from the timing configuration."""
        return TravelTimeEstimator(
            time_per_stop=self.config.timing.time_per_stop_minutes,
            interchange_delay=self.config.timing.interchange_delay_minutes,
        )

    def get_journey_planner(self) -> JourneyPlanner:
        """Get a journey planner bound to the current directory snapshot."""
        directory = self.get_station_directory()
        planner = self._planner
        if planner is None or planner.directory is not directory:
            planner = JourneyPlanner(directory, self.get_fare_table(), self.get_time_estimator())
            self._planner = planner
        return planner

    def get_ticket_pricing(self) -> TicketPricing:
        """Create ticket pricing from the fare table and ticketing configuration."""
        return TicketPricing(
            self.get_fare_table(),
            validity_by_type=self.config.ticketing.validity_minutes,
            default_validity=self.config.ticketing.default_validity_minutes,
        )

    def get_station_catalog_service(self) -> StationCatalogService:
        """Create a catalog service that publishes its edits to this factory."""
        return StationCatalogService(
            self.get_data_repository(),
            publish=self.publish_directory,
            interchange_names=self.config.network.interchange_stations,
        )

    def publish_directory(self, directory: StationDirectory) -> None:
        """Replace the current snapshot with a fully built one."""
        with self._lock:
            self._directory = directory
        self.logger.info(f"Published station directory with {len(directory)} stations")

    def reload(self) -> bool:
        """
        Reload stations and fare rules from the repository.

        The new snapshot is built completely before it replaces the old one,
        so planners never observe a partially loaded directory.

        Returns:
            True on success, False if the data could not be loaded
        """
        try:
            directory = self._build_directory()
            fare_table = self._build_fare_table()
        except (DataRepositoryError, ValueError) as e:
            self.logger.error(f"Failed to reload services: {e}")
            return False

        with self._lock:
            self._directory = directory
            self._fare_table = fare_table
            self._planner = None
        self.logger.info("All services reloaded successfully")
        return True

    def _build_directory(self) -> StationDirectory:
        stations = self.get_data_repository().load_stations()
        return StationDirectory(stations, self.config.network.interchange_stations)

    def _build_fare_table(self) -> FareTable:
        fare_table = FareTable(self.get_data_repository().load_fare_rules())
        fare_table.validate()
        return fare_table

    def get_service_statistics(self) -> Dict[str, Any]:
        """Get statistics from all services."""
        stats: Dict[str, Any] = {
            'data_repository': self.get_data_repository().get_data_source_info(),
        }
        if self._directory is not None:
            stats['station_directory'] = self._directory.get_statistics()
        if self._fare_table is not None:
            stats['fare_rules'] = len(self._fare_table)
        return stats
