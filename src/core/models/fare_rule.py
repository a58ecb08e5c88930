"""
Fare Rule Model

A stop-count interval mapped to a fixed fare.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class FareRule:
    """Closed stop-count interval [min_stops, max_stops] priced at a fixed fare."""

    min_stops: int
    max_stops: int
    fare: int

    def __post_init__(self):
        """Validate fare rule data."""
        if self.min_stops < 0:
            raise ValueError("Fare rule min_stops cannot be negative")
        if self.max_stops < self.min_stops:
            raise ValueError(
                f"Fare rule max_stops ({self.max_stops}) is below min_stops ({self.min_stops})"
            )
        if self.fare < 0:
            raise ValueError("Fare cannot be negative")

    def covers(self, stop_count: int) -> bool:
        """Check whether the stop count falls inside this rule's interval."""
        return self.min_stops <= stop_count <= self.max_stops

    def overlaps(self, other: 'FareRule') -> bool:
        """Check whether two rules share at least one stop count."""
        return self.min_stops <= other.max_stops and other.min_stops <= self.max_stops

    def to_dict(self) -> Dict[str, Any]:
        """Convert fare rule to its JSON record."""
        return {"minStops": self.min_stops, "maxStops": self.max_stops, "fare": self.fare}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FareRule':
        """Create FareRule from its JSON record."""
        return cls(
            min_stops=int(data["minStops"]),
            max_stops=int(data["maxStops"]),
            fare=int(data["fare"]),
        )
