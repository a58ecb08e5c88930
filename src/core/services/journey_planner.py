"""
Journey Planner

Travel-planner flow: validates station names entered by a rider, resolves
them against the station directory and combines route, fare and travel time
into a JourneyPlan.
"""

import logging
from typing import List

from ..interfaces.i_station_service import IStationService
from ..models.journey import JourneyPlan
from ..models.station import Station
from .fare_service import FareTable
from .route_resolver import RouteResolver
from .station_validator import StationValidationError, validate_journey_endpoints
from .time_estimator import TravelTimeEstimator
from ...utils.helpers import format_fare


class JourneyPlanner:
    """Plans journeys against one station directory snapshot."""

    def __init__(self, directory: IStationService, fare_table: FareTable,
                 time_estimator: TravelTimeEstimator):
        """
        Initialize the journey planner.

        Args:
            directory: Station directory snapshot
            fare_table: Fare rules used to price journeys
            time_estimator: Travel time model
        """
        self.directory = directory
        self.fare_table = fare_table
        self.time_estimator = time_estimator
        self.route_resolver = RouteResolver.for_directory(directory)
        self.logger = logging.getLogger(__name__)

    def find_station(self, name: str) -> Station:
        """
        Resolve a station name entered by a rider.

        Raises:
            StationValidationError: If no station has that name
        """
        station = self.directory.get_station_by_name(name)
        if station is None:
            self.logger.warning(f"Station not found: {name}")
            raise StationValidationError(f"Unknown station '{name.strip()}'. Please re-enter.")
        self.logger.info(f"Station found: {station.name} ({station.line})")
        return station

    def plan(self, from_name: str, to_name: str) -> JourneyPlan:
        """
        Plan a journey between two station names.

        Raises:
            StationValidationError: If either name is invalid, unknown, or both are equal
        """
        self.logger.info(f"Planning journey from '{from_name}' to '{to_name}'")
        validate_journey_endpoints(from_name, to_name)
        start = self.find_station(from_name)
        end = self.find_station(to_name)
        return self.plan_between(start, end)

    def plan_between(self, start: Station, end: Station) -> JourneyPlan:
        """Plan a journey between two stations already in the directory."""
        journey = self.route_resolver.resolve(self.directory.get_all_stations(), start, end)
        fare = self.fare_table.fare(journey.stops)
        travel_time = self.time_estimator.travel_time(journey.stops, journey.has_interchange)

        plan = JourneyPlan(start=start, end=end, journey=journey,
                           fare=fare, travel_time_minutes=travel_time)
        self.logger.info(
            f"Journey planned from '{start.name}' to '{end.name}'. Stops: {journey.stops}, "
            f"Fare: {fare}, Estimated Time: {travel_time} mins, "
            f"Interchange: {journey.interchange_station}"
        )
        return plan


def format_plan(plan: JourneyPlan, currency: str = "₹") -> str:
    """Render a journey plan as plain text for the console."""
    if not plan.is_reachable:
        return f"No route found from {plan.start.name} to {plan.end.name}."

    lines: List[str] = [
        f"From: {plan.start.name} ({plan.start.line})",
    ]
    if plan.journey.has_interchange:
        lines.append(f"Interchange at: {plan.journey.interchange_station} (Change Line)")
    lines.append(f"To: {plan.end.name} ({plan.end.line})")
    lines.append(f"Stops: {plan.stops}")
    lines.append(f"Fare: {format_fare(plan.fare, currency)}")
    lines.append(f"Estimated Time: {plan.travel_time_minutes} mins")
    lines.append(f"Journey Path: {plan.journey.get_path_display()}")
    return "\n".join(lines)
