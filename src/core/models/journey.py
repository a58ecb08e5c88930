"""
Journey Models

Value objects produced by route resolution and journey planning.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Dict, Any

from .station import Station

NO_FARE = -1


@dataclass(frozen=True)
class JourneyResult:
    """
    Ordered path from origin to destination, both included.

    An empty path means the journey could not be resolved.
    """

    stations: Tuple[Station, ...] = ()
    stops: int = 0
    interchange_station: Optional[str] = None

    def __post_init__(self):
        """Store the path as a tuple so the result stays immutable."""
        if not isinstance(self.stations, tuple):
            object.__setattr__(self, 'stations', tuple(self.stations))

    @classmethod
    def unreachable(cls) -> 'JourneyResult':
        """Result signalling that no route exists."""
        return cls((), 0, None)

    @classmethod
    def from_path(cls, path: List[Station],
                  interchange_station: Optional[str] = None) -> 'JourneyResult':
        """Build a result from a path, deriving the stop count."""
        return cls(tuple(path), max(0, len(path) - 1), interchange_station)

    @property
    def is_reachable(self) -> bool:
        """Check whether a path was found."""
        return len(self.stations) > 0

    @property
    def has_interchange(self) -> bool:
        """Check whether the journey changes line."""
        return self.interchange_station is not None

    @property
    def station_names(self) -> List[str]:
        """Names along the path, in travel order."""
        return [station.name for station in self.stations]

    def get_path_display(self, separator: str = " → ") -> str:
        """Get the path formatted for display."""
        return separator.join(self.station_names)


@dataclass(frozen=True)
class JourneyPlan:
    """A resolved journey priced and timed for a rider."""

    start: Station
    end: Station
    journey: JourneyResult
    fare: int
    travel_time_minutes: int

    @property
    def is_reachable(self) -> bool:
        return self.journey.is_reachable

    @property
    def is_priceable(self) -> bool:
        """A fare of NO_FARE blocks ticket issuance."""
        return self.fare != NO_FARE

    @property
    def stops(self) -> int:
        return self.journey.stops

    def to_dict(self) -> Dict[str, Any]:
        """Convert plan to dictionary representation."""
        return {
            "from": self.start.name,
            "from_line": self.start.line,
            "to": self.end.name,
            "to_line": self.end.line,
            "path": self.journey.station_names,
            "stops": self.journey.stops,
            "interchange": self.journey.interchange_station,
            "fare": self.fare,
            "travel_time_minutes": self.travel_time_minutes,
        }
