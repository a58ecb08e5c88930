"""
Ticket Pricing

Turns a resolved journey into a ticket quote: fare per passenger from the
fare table, ticket-type multiplier, passenger minimums and validity.
"""

import logging
from typing import Dict, Mapping, Optional

from ..models.journey import JourneyResult, NO_FARE
from ..models.ticket import TicketType, TicketQuote
from .fare_service import FareTable

DEFAULT_VALIDITY_MINUTES = 120

DEFAULT_VALIDITY_BY_TYPE: Dict[str, int] = {
    "SJT": 120,
    "RJT": 180,
    "FAMILY": 300,
    "GROUP": 300,
    "SVP": 1440,
}


class FareUnavailableError(Exception):
    """Raised when no fare rule prices a journey, blocking ticket issuance."""

    pass


class TicketPricing:
    """Quotes tickets for resolved journeys."""

    def __init__(self, fare_table: FareTable,
                 validity_by_type: Optional[Mapping[str, int]] = None,
                 default_validity: int = DEFAULT_VALIDITY_MINUTES):
        self.fare_table = fare_table
        self.validity_by_type = {
            key.upper(): minutes
            for key, minutes in (validity_by_type or DEFAULT_VALIDITY_BY_TYPE).items()
        }
        self.default_validity = default_validity
        self.logger = logging.getLogger(__name__)

    def validity_minutes(self, ticket_type: str) -> int:
        """Validity of a ticket type in minutes; unknown types get the default."""
        validity = self.validity_by_type.get(ticket_type.upper(), self.default_validity)
        self.logger.debug(f"Ticket type: {ticket_type} → validity: {validity} mins")
        return validity

    def validate_ticket_count(self, ticket_type: TicketType, passengers: int) -> None:
        """
        Check the passenger count allowed for a ticket type.

        Raises:
            ValueError: If the count is not positive or below the type's minimum
        """
        if passengers <= 0:
            raise ValueError("Number of tickets must be greater than 0")
        if passengers < ticket_type.min_passengers:
            raise ValueError(
                f"{ticket_type.value} ticket requires at least {ticket_type.min_passengers} persons"
            )

    def quote(self, journey: JourneyResult, ticket_type: TicketType, passengers: int = 1) -> TicketQuote:
        """
        Price tickets for a journey.

        Args:
            journey: Resolved journey
            ticket_type: Kind of ticket
            passengers: Number of tickets

        Returns:
            TicketQuote with unit and total fare

        Raises:
            ValueError: If the passenger count is invalid for the ticket type
            FareUnavailableError: If the journey is unreachable or unpriced
        """
        self.validate_ticket_count(ticket_type, passengers)

        if not journey.is_reachable:
            raise FareUnavailableError("Journey is unreachable and cannot be priced")

        unit_fare = self.fare_table.fare(journey.stops)
        if unit_fare == NO_FARE:
            self.logger.warning(f"No fare rule for {journey.stops} stops; ticket blocked")
            raise FareUnavailableError(f"No fare available for {journey.stops} stops")

        total_fare = unit_fare * passengers * ticket_type.fare_multiplier
        quote = TicketQuote(
            ticket_type=ticket_type,
            passengers=passengers,
            stops=journey.stops,
            unit_fare=unit_fare,
            total_fare=total_fare,
            validity_minutes=self.validity_minutes(ticket_type.value),
        )
        self.logger.info(
            f"Quoted {passengers} x {ticket_type.value} for {journey.stops} stops: {total_fare}"
        )
        return quote
