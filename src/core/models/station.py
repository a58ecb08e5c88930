"""
Station Model

Immutable data model for metro stations.
"""

from dataclasses import dataclass
from typing import Dict, Any


def parse_flag(value: Any, field_name: str) -> bool:
    """
    Read a JSON facility flag.

    Accepts booleans, the strings "true"/"false" in any case, 0/1 and null
    (false). Anything else is rejected.

    Raises:
        ValueError: If the value is not a recognisable boolean
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "false"):
            return text == "true"
    elif isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"Station {field_name} must be true or false, got {value!r}")


@dataclass(frozen=True)
class Station:
    """
    Immutable data class representing a metro station.

    A station's position on its line is not stored here: it is the station's
    index within the ordered sequence of stations sharing its line tag.
    """

    id: str
    name: str
    line: str
    has_parking: bool = False
    has_feeder: bool = False

    def __post_init__(self):
        """Validate station data after initialization."""
        for field_name in ("id", "name", "line"):
            if not isinstance(getattr(self, field_name), str):
                raise TypeError(f"Station {field_name} must be a string")
        if not self.name.strip():
            raise ValueError("Station name cannot be empty")
        if not self.id.strip():
            raise ValueError("Station id cannot be empty")
        if not self.line.strip():
            raise ValueError("Station line cannot be empty")

    def is_on_line(self, line: str) -> bool:
        """Check whether this station carries the given line tag (case-insensitive)."""
        return self.line.lower() == line.lower()

    def matches_name(self, name: str) -> bool:
        """Check whether this station has the given name (case-insensitive)."""
        return self.name.lower() == name.lower()

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to its JSON record."""
        return {
            "id": self.id,
            "name": self.name,
            "line": self.line,
            "hasParking": self.has_parking,
            "hasFeeder": self.has_feeder,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Station':
        """Create Station from its JSON record."""
        return cls(
            id=data["id"],
            name=data["name"],
            line=data["line"],
            has_parking=parse_flag(data.get("hasParking", False), "hasParking"),
            has_feeder=parse_flag(data.get("hasFeeder", False), "hasFeeder"),
        )

    def __str__(self) -> str:
        """String representation of the station."""
        return self.name

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return f"Station(id='{self.id}', name='{self.name}', line='{self.line}')"
