"""
Core Package

Core services, interfaces, and models for the metro journey planner.
"""

# Import interfaces
from .interfaces import IStationService, IRouteService, IDataRepository

# Import models
from .models import (
    Station, MetroLine, FareRule, JourneyResult, JourneyPlan, NO_FARE,
    TicketType, TicketQuote
)

# Import services
from .services import (
    StationDirectory, RouteResolver, resolve_journey, FareTable,
    TravelTimeEstimator, TicketPricing, JourneyPlanner, JsonDataRepository,
    StationCatalogService, ServiceFactory
)

__all__ = [
    # Interfaces
    'IStationService',
    'IRouteService',
    'IDataRepository',

    # Models
    'Station',
    'MetroLine',
    'FareRule',
    'JourneyResult',
    'JourneyPlan',
    'NO_FARE',
    'TicketType',
    'TicketQuote',

    # Services
    'StationDirectory',
    'RouteResolver',
    'resolve_journey',
    'FareTable',
    'TravelTimeEstimator',
    'TicketPricing',
    'JourneyPlanner',
    'JsonDataRepository',
    'StationCatalogService',
    'ServiceFactory'
]
