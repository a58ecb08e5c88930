"""
Core Services Package

Service implementations for the metro journey planner.
"""

from .station_directory import StationDirectory, DEFAULT_INTERCHANGE_STATIONS
from .route_resolver import RouteResolver, resolve_journey
from .fare_service import FareTable
from .time_estimator import TravelTimeEstimator, round_half_up
from .ticket_pricing import TicketPricing, FareUnavailableError
from .station_validator import StationValidationError
from .journey_planner import JourneyPlanner, format_plan
from .json_data_repository import JsonDataRepository, DataRepositoryError
from .station_catalog_service import StationCatalogService, StationCatalogError
from .service_factory import ServiceFactory

__all__ = [
    'StationDirectory',
    'DEFAULT_INTERCHANGE_STATIONS',
    'RouteResolver',
    'resolve_journey',
    'FareTable',
    'TravelTimeEstimator',
    'round_half_up',
    'TicketPricing',
    'FareUnavailableError',
    'StationValidationError',
    'JourneyPlanner',
    'format_plan',
    'JsonDataRepository',
    'DataRepositoryError',
    'StationCatalogService',
    'StationCatalogError',
    'ServiceFactory'
]
