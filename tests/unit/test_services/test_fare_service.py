"""
Unit tests for FareTable.
"""

import logging
import pytest

from src.core.models.fare_rule import FareRule
from src.core.models.journey import NO_FARE
from src.core.services.fare_service import FareTable


class TestFareLookup:
    """Fare lookup by stop count."""

    @pytest.mark.parametrize("stops, fare", [
        (0, 10), (2, 10), (3, 20), (5, 20), (6, 30), (12, 30), (13, 40), (19, 50), (40, 50),
    ])
    def test_fare_by_stops(self, fare_table, stops, fare):
        assert fare_table.fare(stops) == fare

    def test_no_rule_matches(self, fare_table):
        assert fare_table.fare(41) == NO_FARE
        assert fare_table.fare(50) == NO_FARE

    def test_single_rule_table(self):
        table = FareTable([FareRule(4, 8, 20)])

        assert table.fare(5) == 20
        assert table.fare(3) == NO_FARE
        assert table.fare(9) == NO_FARE

    def test_fare_never_drops_as_stops_grow(self, fare_table):
        fares = [fare_table.fare(stops) for stops in range(0, 41)]

        assert fares == sorted(fares)

    def test_empty_table(self):
        assert FareTable([]).fare(0) == NO_FARE

    def test_first_matching_rule_wins(self):
        table = FareTable([FareRule(3, 5, 20), FareRule(5, 8, 30)])

        assert table.fare(5) == 20
        assert table.fare(6) == 30

    def test_lookup_is_deterministic(self, fare_table):
        assert [fare_table.fare(7) for _ in range(3)] == [30, 30, 30]


class TestFareTableValidation:
    """Reporting of overlapping and gapped rule sets."""

    def test_clean_table(self, fare_table):
        assert fare_table.find_overlaps() == []
        assert fare_table.find_gaps() == []
        assert fare_table.validate()

    def test_overlaps_reported(self, caplog):
        first, second = FareRule(0, 5, 10), FareRule(4, 8, 20)
        table = FareTable([first, second])

        assert table.find_overlaps() == [(first, second)]
        with caplog.at_level(logging.WARNING):
            assert not table.validate()
        assert "overlap" in caplog.text

    def test_gaps_reported(self, caplog):
        table = FareTable([FareRule(6, 10, 30), FareRule(1, 3, 10)])

        assert table.find_gaps() == [(0, 0), (4, 5)]
        with caplog.at_level(logging.WARNING):
            assert not table.validate()
        assert "No fare rule covers 4-5 stops" in caplog.text

    def test_empty_table_invalid(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert not FareTable([]).validate()
        assert "empty" in caplog.text

    def test_max_stops_and_len(self, fare_table):
        assert fare_table.max_stops == 40
        assert len(fare_table) == 5
        assert FareTable([]).max_stops == -1
