"""
Travel Time Estimator

Fixed linear model of journey duration: minutes per stop plus a flat
penalty for changing line.
"""

import logging
import math

TIME_PER_STOP_MINUTES = 1.5
INTERCHANGE_DELAY_MINUTES = 3


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


class TravelTimeEstimator:
    """Estimates travel time in whole minutes."""

    def __init__(self, time_per_stop: float = TIME_PER_STOP_MINUTES,
                 interchange_delay: int = INTERCHANGE_DELAY_MINUTES):
        if time_per_stop < 0:
            raise ValueError("Time per stop cannot be negative")
        if interchange_delay < 0:
            raise ValueError("Interchange delay cannot be negative")
        self.time_per_stop = time_per_stop
        self.interchange_delay = interchange_delay
        self.logger = logging.getLogger(__name__)

    def travel_time(self, stop_count: int, has_interchange: bool) -> int:
        """
        Calculate estimated travel time.

        Args:
            stop_count: Number of stops travelled
            has_interchange: True if the journey changes line

        Returns:
            Estimated travel time in minutes
        """
        time = round_half_up(stop_count * self.time_per_stop)
        if has_interchange:
            time += self.interchange_delay
        self.logger.debug(
            f"Calculated travel time: {time} mins for {stop_count} stops "
            f"(interchange: {has_interchange})"
        )
        return time
