"""
Metro Line Model

The fixed set of lines that make up the network.
"""

from enum import Enum
from typing import Optional


class MetroLine(Enum):
    """Lines of the metro network."""
    BLUE = "Blue"
    GREEN = "Green"

    @property
    def id_prefix(self) -> str:
        """Prefix used by station ids on this line (e.g. "B" for B1)."""
        return self.value[0]

    @property
    def json_key(self) -> str:
        """Key holding this line's stations in stations.json."""
        return f"{self.value.lower()}LineStations"

    @classmethod
    def from_tag(cls, tag: str) -> Optional['MetroLine']:
        """Look up a line by its tag, ignoring case. Returns None if unknown."""
        if not tag:
            return None
        for line in cls:
            if line.value.lower() == tag.strip().lower():
                return line
        return None

    @classmethod
    def from_json_key(cls, key: str) -> Optional['MetroLine']:
        """Look up a line from a stations.json key such as "greenLineStations"."""
        for line in cls:
            if line.json_key == key:
                return line
        return None
