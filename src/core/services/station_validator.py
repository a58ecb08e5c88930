"""
Station Validator

Validation of user-entered station names, lines and ids.
"""

import logging
import re
from typing import Iterable, Optional

from ..models.metro_line import MetroLine
from ..models.station import Station

logger = logging.getLogger(__name__)

STATION_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9 ]+$")
STATION_ID_PATTERN = re.compile(r"^([A-Za-z])(\d+)$")


class StationValidationError(Exception):
    """Raised when station input fails validation."""

    pass


def validate_station_name(name: Optional[str]) -> str:
    """
    Validate a station name.

    Returns:
        The name with surrounding whitespace removed

    Raises:
        StationValidationError: If the name is empty or has invalid characters
    """
    if name is None or not name.strip():
        logger.warning("Station name empty")
        raise StationValidationError("Station name cannot be empty. Please enter a valid station name.")

    name = name.strip()
    if not STATION_NAME_PATTERN.match(name):
        logger.warning(f"Station name contains invalid characters: {name}")
        raise StationValidationError(
            "Station name contains invalid characters. Only letters, numbers and spaces are allowed."
        )
    return name


def validate_journey_endpoints(from_station: Optional[str], to_station: Optional[str]) -> None:
    """
    Validate a from/to pair entered for a journey.

    Raises:
        StationValidationError: If either name is invalid or both are the same
    """
    from_name = validate_station_name(from_station)
    to_name = validate_station_name(to_station)
    if from_name.lower() == to_name.lower():
        logger.warning(f"'From' and 'To' stations are the same: {from_name}")
        raise StationValidationError(
            "'From Station' and 'To Station' cannot be the same. Please choose different stations."
        )


def validate_station_line(line: Optional[str]) -> MetroLine:
    """
    Validate a line tag.

    Returns:
        The matching MetroLine

    Raises:
        StationValidationError: If the tag is empty or not a known line
    """
    allowed = " or ".join(f"'{l.value}'" for l in MetroLine)
    if line is None or not line.strip():
        logger.warning("Station line empty")
        raise StationValidationError(f"Station line cannot be empty. Please enter {allowed}.")

    metro_line = MetroLine.from_tag(line)
    if metro_line is None:
        logger.warning(f"Invalid station line: {line}")
        raise StationValidationError(f"Invalid station line. Allowed options: {allowed}.")
    return metro_line


def validate_station_id(station_id: Optional[str], line: Optional[MetroLine] = None) -> str:
    """
    Validate a station id such as "B12".

    Args:
        station_id: Id to check
        line: If given, the id prefix must belong to this line

    Returns:
        The id, upper-cased and stripped

    Raises:
        StationValidationError: If the id is malformed or has the wrong prefix
    """
    if station_id is None or not station_id.strip():
        logger.warning("Station ID empty")
        raise StationValidationError("Station ID cannot be empty.")

    station_id = station_id.strip().upper()
    match = STATION_ID_PATTERN.match(station_id)
    prefixes = {l.id_prefix: l for l in MetroLine}
    if not match or match.group(1) not in prefixes:
        logger.warning(f"Station ID invalid: {station_id}")
        raise StationValidationError(
            f"Station ID must start with one of {sorted(prefixes)} followed by numbers (e.g. B1, G2)."
        )

    if line is not None and prefixes[match.group(1)] is not line:
        logger.warning(f"Station ID {station_id} does not belong to line {line.value}")
        raise StationValidationError(
            f"Station ID for the {line.value} line must start with '{line.id_prefix}'."
        )
    return station_id


def validate_unique_station(name: str, stations: Iterable[Station],
                            ignore_id: Optional[str] = None) -> None:
    """
    Check that no other station already uses a name.

    Args:
        name: Candidate station name
        stations: Existing stations
        ignore_id: Id of a station being renamed, excluded from the check

    Raises:
        StationValidationError: If the name is taken
    """
    for station in stations:
        if ignore_id is not None and station.id.lower() == ignore_id.lower():
            continue
        if station.matches_name(name):
            logger.warning(f"Duplicate station found: {name}")
            raise StationValidationError(
                f"Duplicate station found. The station '{name}' already exists."
            )


def next_station_id(stations: Iterable[Station], line: MetroLine) -> str:
    """
    Generate the next id for a line: its prefix plus one more than the
    highest numeric suffix already used on that line.

    Ids that do not follow the prefix-and-number form are skipped.
    """
    highest = 0
    for station in stations:
        if not station.is_on_line(line.value):
            continue
        match = STATION_ID_PATTERN.match(station.id.strip())
        if match:
            highest = max(highest, int(match.group(2)))
    return f"{line.id_prefix}{highest + 1}"
