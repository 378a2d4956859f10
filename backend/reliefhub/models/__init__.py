# Re-export all models for convenient imports
from reliefhub.models.profile import Profile, ProfileRole
from reliefhub.models.camp import Camp, CampStatus
from reliefhub.models.need import CampNeed, NeedUrgency, NeedStatus, URGENCY_RANK, need_status_for
from reliefhub.models.assistance import Assistance, DeliveryStatus, NEXT_DELIVERY_STATUS
from reliefhub.models.volunteer import Volunteer, VolunteerType, VolunteerStatus

__all__ = [
    # Profile
    "Profile",
    "ProfileRole",
    # Camp
    "Camp",
    "CampStatus",
    # Needs
    "CampNeed",
    "NeedUrgency",
    "NeedStatus",
    "URGENCY_RANK",
    "need_status_for",
    # Assistance ledger
    "Assistance",
    "DeliveryStatus",
    "NEXT_DELIVERY_STATUS",
    # Volunteers
    "Volunteer",
    "VolunteerType",
    "VolunteerStatus",
]
