"""
Unit Tests for the relief models
Tests for: need status derivation, delivery edges, derived quantities
"""
import pytest

from reliefhub.models import (
    Camp,
    CampNeed,
    DeliveryStatus,
    NEXT_DELIVERY_STATUS,
    NeedStatus,
    URGENCY_RANK,
    NeedUrgency,
    need_status_for,
)


class TestNeedStatus:
    """Status is a pure function of (fulfilled, needed)"""

    @pytest.mark.parametrize("fulfilled,needed,expected", [
        (0, 10, NeedStatus.PENDING),
        (1, 10, NeedStatus.PARTIAL),
        (9, 10, NeedStatus.PARTIAL),
        (10, 10, NeedStatus.FULFILLED),
    ])
    def test_status_for_quantities(self, fulfilled, needed, expected):
        assert need_status_for(fulfilled, needed) == expected

    def test_remaining_is_needed_minus_fulfilled(self):
        need = CampNeed(item_name="Water", quantity_needed=10, quantity_fulfilled=6)
        assert need.remaining == 4

    def test_remaining_never_negative(self):
        need = CampNeed(item_name="Water", quantity_needed=5, quantity_fulfilled=5)
        assert need.remaining == 0


class TestUrgencyRank:
    def test_severity_order(self):
        ordered = sorted(URGENCY_RANK, key=URGENCY_RANK.get, reverse=True)
        assert ordered == [
            NeedUrgency.CRITICAL.value,
            NeedUrgency.HIGH.value,
            NeedUrgency.MEDIUM.value,
            NeedUrgency.LOW.value,
        ]


class TestDeliveryEdges:
    """Only pledged -> in_transit -> delivered is allowed"""

    def test_forward_edges(self):
        assert NEXT_DELIVERY_STATUS[DeliveryStatus.PLEDGED.value] == DeliveryStatus.IN_TRANSIT.value
        assert NEXT_DELIVERY_STATUS[DeliveryStatus.IN_TRANSIT.value] == DeliveryStatus.DELIVERED.value

    def test_delivered_is_terminal(self):
        assert DeliveryStatus.DELIVERED.value not in NEXT_DELIVERY_STATUS


class TestCampSeats:
    def test_available_seats(self):
        camp = Camp(name="North", total_capacity=50, occupied_seats=20)
        assert camp.available_seats == 30

    def test_full_camp_has_no_available_seats(self):
        camp = Camp(name="North", total_capacity=50, occupied_seats=50)
        assert camp.available_seats == 0
