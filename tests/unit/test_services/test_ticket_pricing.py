"""
Unit tests for TicketPricing.
"""

import pytest

from src.core.models.fare_rule import FareRule
from src.core.models.journey import JourneyResult
from src.core.models.ticket import TicketType
from src.core.services.fare_service import FareTable
from src.core.services.ticket_pricing import TicketPricing, FareUnavailableError


@pytest.fixture
def pricing(fare_table):
    return TicketPricing(fare_table)


@pytest.fixture
def four_stop_journey(blue_line):
    return JourneyResult.from_path(blue_line[:5])


class TestValidity:

    @pytest.mark.parametrize("ticket_type, minutes", [
        ("SJT", 120), ("RJT", 180), ("FAMILY", 300), ("GROUP", 300), ("SVP", 1440),
        ("sjt", 120), ("WEEKLY", 120),
    ])
    def test_default_validity(self, pricing, ticket_type, minutes):
        assert pricing.validity_minutes(ticket_type) == minutes

    def test_configured_validity(self, fare_table):
        pricing = TicketPricing(fare_table, {"sjt": 90}, default_validity=60)

        assert pricing.validity_minutes("SJT") == 90
        assert pricing.validity_minutes("RJT") == 60


class TestTicketCount:

    @pytest.mark.parametrize("ticket_type, passengers, message", [
        (TicketType.SJT, 0, "greater than 0"),
        (TicketType.RJT, -2, "greater than 0"),
        (TicketType.FAMILY, 1, "at least 2"),
        (TicketType.GROUP, 19, "at least 20"),
    ])
    def test_invalid_counts(self, pricing, ticket_type, passengers, message):
        with pytest.raises(ValueError, match=message):
            pricing.validate_ticket_count(ticket_type, passengers)

    @pytest.mark.parametrize("ticket_type, passengers", [
        (TicketType.SJT, 1), (TicketType.FAMILY, 2), (TicketType.GROUP, 20), (TicketType.SVP, 3),
    ])
    def test_valid_counts(self, pricing, ticket_type, passengers):
        pricing.validate_ticket_count(ticket_type, passengers)


class TestQuote:

    def test_single_journey(self, pricing, four_stop_journey):
        quote = pricing.quote(four_stop_journey, TicketType.SJT)

        assert quote.stops == 4
        assert quote.unit_fare == 20
        assert quote.total_fare == 20
        assert quote.validity_minutes == 120

    def test_return_journey_doubles_fare(self, pricing, four_stop_journey):
        quote = pricing.quote(four_stop_journey, TicketType.RJT, passengers=3)

        assert quote.total_fare == 120
        assert quote.validity_minutes == 180

    def test_group_quote(self, pricing, four_stop_journey):
        quote = pricing.quote(four_stop_journey, TicketType.GROUP, passengers=20)

        assert quote.passengers == 20
        assert quote.total_fare == 400

    def test_unreachable_journey_blocked(self, pricing):
        with pytest.raises(FareUnavailableError, match="unreachable"):
            pricing.quote(JourneyResult.unreachable(), TicketType.SJT)

    def test_unpriced_journey_blocked(self, four_stop_journey):
        pricing = TicketPricing(FareTable([FareRule(0, 2, 10)]))

        with pytest.raises(FareUnavailableError, match="4 stops"):
            pricing.quote(four_stop_journey, TicketType.SJT)

    def test_count_checked_before_fare(self, pricing):
        with pytest.raises(ValueError):
            pricing.quote(JourneyResult.unreachable(), TicketType.FAMILY, passengers=1)
