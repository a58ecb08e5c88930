"""
Fare Service

Prices journeys by stop count using an ordered table of fare rules.
"""

import logging
from typing import Iterable, List, Tuple

from ..models.fare_rule import FareRule
from ..models.journey import NO_FARE


class FareTable:
    """
    Ordered, read-only list of fare rules.

    Rules are consulted in declared order and the first rule covering the stop
    count wins, so overlapping rules resolve to the earliest one.
    """

    def __init__(self, rules: Iterable[FareRule]):
        self.rules: Tuple[FareRule, ...] = tuple(rules)
        self.logger = logging.getLogger(__name__)

    def fare(self, stop_count: int) -> int:
        """
        Get the fare for a number of stops.

        Args:
            stop_count: Number of station-to-station hops

        Returns:
            Fare of the first matching rule, or NO_FARE (-1) if none matches
        """
        fare = next((rule.fare for rule in self.rules if rule.covers(stop_count)), NO_FARE)
        self.logger.debug(f"Calculating fare for {stop_count} stops: {fare}")
        return fare

    def find_overlaps(self) -> List[Tuple[FareRule, FareRule]]:
        """Pairs of rules sharing at least one stop count, in declared order."""
        overlaps = []
        for i, rule in enumerate(self.rules):
            for other in self.rules[i + 1:]:
                if rule.overlaps(other):
                    overlaps.append((rule, other))
        return overlaps

    def find_gaps(self) -> List[Tuple[int, int]]:
        """Uncovered stop-count ranges between 0 and the highest max_stops."""
        if not self.rules:
            return []

        gaps = []
        next_uncovered = 0
        for rule in sorted(self.rules, key=lambda r: r.min_stops):
            if rule.min_stops > next_uncovered:
                gaps.append((next_uncovered, rule.min_stops - 1))
            next_uncovered = max(next_uncovered, rule.max_stops + 1)
        return gaps

    def validate(self) -> bool:
        """
        Log overlapping or gapped rules.

        Lookup behaviour is unchanged either way; this only reports rule sets
        whose pricing depends on declaration order or leaves counts unpriced.

        Returns:
            True if the rules are gapless and non-overlapping
        """
        if not self.rules:
            self.logger.warning("Fare table is empty; every fare lookup will return -1")
            return False

        overlaps = self.find_overlaps()
        for first, second in overlaps:
            self.logger.warning(
                f"Fare rules [{first.min_stops}-{first.max_stops}] and "
                f"[{second.min_stops}-{second.max_stops}] overlap; the earlier rule wins"
            )
        gaps = self.find_gaps()
        for low, high in gaps:
            self.logger.warning(f"No fare rule covers {low}-{high} stops")

        return not overlaps and not gaps

    @property
    def max_stops(self) -> int:
        """Highest stop count any rule covers, or -1 for an empty table."""
        return max((rule.max_stops for rule in self.rules), default=-1)

    def __len__(self) -> int:
        return len(self.rules)
