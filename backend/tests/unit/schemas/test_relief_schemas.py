"""
Unit Tests for request/response schemas
"""
import pytest
from pydantic import ValidationError

from reliefhub.models import NeedUrgency, ProfileRole, VolunteerType
from reliefhub.schemas import (
    Actor,
    CampCreate,
    NeedCreate,
    SeatRequest,
    VolunteerCreate,
)


class TestCampCreate:

    def valid_data(self, **overrides):
        data = {
            "name": "Riverside Camp",
            "location": "Kochi",
            "total_capacity": 100,
            "occupied_seats": 10,
            "contact_phone": "+91 98470 00000",
            "contact_email": "camp@reliefhub.org",
        }
        data.update(overrides)
        return data

    def test_valid(self):
        camp = CampCreate(**self.valid_data())
        assert camp.total_capacity == 100

    def test_occupied_cannot_exceed_capacity(self):
        with pytest.raises(ValidationError):
            CampCreate(**self.valid_data(occupied_seats=101))

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValidationError):
            CampCreate(**self.valid_data(total_capacity=-1, occupied_seats=0))

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            CampCreate(**self.valid_data(contact_email="not-an-email"))


class TestNeedCreate:

    def test_defaults_to_medium_urgency(self):
        need = NeedCreate(item_name="Rice", quantity_needed=50)
        assert need.urgency == NeedUrgency.MEDIUM

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            NeedCreate(item_name="Rice", quantity_needed=0)

    def test_unknown_urgency_rejected(self):
        with pytest.raises(ValidationError):
            NeedCreate(item_name="Rice", quantity_needed=5, urgency="extreme")


class TestVolunteerCreate:

    def test_camp_volunteer_requires_camp(self):
        with pytest.raises(ValidationError):
            VolunteerCreate(volunteer_type=VolunteerType.CAMP_VOLUNTEER)

    def test_transportation_without_camp(self):
        data = VolunteerCreate(volunteer_type=VolunteerType.TRANSPORTATION, skills="Truck driver")
        assert data.camp_id is None


class TestSeatRequest:

    def test_defaults_to_one(self):
        assert SeatRequest().seats == 1

    def test_non_positive_rejected(self):
        with pytest.raises(ValidationError):
            SeatRequest(seats=0)


class TestActor:

    def test_role_helpers(self):
        assert Actor(id="a", role=ProfileRole.NGO).is_ngo
        assert Actor(id="b", role=ProfileRole.CAMP).is_camp_admin
        assert not Actor(id="c", role=ProfileRole.USER).is_ngo

    def test_frozen(self):
        actor = Actor(id="a", role=ProfileRole.USER)
        with pytest.raises(ValidationError):
            actor.role = ProfileRole.NGO
