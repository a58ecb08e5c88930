"""
Core Models Package

Immutable value records for the metro journey planner.
"""

from .station import Station
from .metro_line import MetroLine
from .fare_rule import FareRule
from .journey import JourneyResult, JourneyPlan, NO_FARE
from .ticket import TicketType, TicketQuote

__all__ = [
    'Station',
    'MetroLine',
    'FareRule',
    'JourneyResult',
    'JourneyPlan',
    'NO_FARE',
    'TicketType',
    'TicketQuote'
]
