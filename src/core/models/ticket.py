"""
Ticket Models

Ticket types and fare quotes. Tickets themselves are not persisted here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TicketType(Enum):
    """Kinds of ticket sold at the counter."""
    SJT = "SJT"        # single journey
    RJT = "RJT"        # return journey
    FAMILY = "FAMILY"
    GROUP = "GROUP"
    SVP = "SVP"        # store value pass

    @property
    def fare_multiplier(self) -> int:
        """Return journeys are charged for both legs."""
        return 2 if self is TicketType.RJT else 1

    @property
    def min_passengers(self) -> int:
        if self is TicketType.FAMILY:
            return 2
        if self is TicketType.GROUP:
            return 20
        return 1

    @classmethod
    def from_input(cls, value: str) -> Optional['TicketType']:
        """Parse a ticket type from user input, ignoring case and surrounding spaces."""
        if not value or not value.strip():
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class TicketQuote:
    """Price and validity for a number of tickets on one journey."""

    ticket_type: TicketType
    passengers: int
    stops: int
    unit_fare: int
    total_fare: int
    validity_minutes: int
