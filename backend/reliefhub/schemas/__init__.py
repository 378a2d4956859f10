# Pydantic schemas
from reliefhub.schemas.profile import Actor, ProfileCreate, ProfileUpdate, ProfileResponse
from reliefhub.schemas.camp import CampCreate, CampUpdate, SeatRequest, CampResponse
from reliefhub.schemas.need import NeedCreate, NeedResponse, OpenNeedResponse
from reliefhub.schemas.assistance import (
    PledgeCreate,
    PledgeResponse,
    DeliveryStatusUpdate,
    AssistanceResponse,
)
from reliefhub.schemas.volunteer import VolunteerCreate, VolunteerResponse
from reliefhub.schemas.dashboard import (
    CampCard,
    BadgedNeed,
    CitizenDashboard,
    CampAdminDashboard,
    NGODashboard,
)

__all__ = [
    "Actor",
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileResponse",
    "CampCreate",
    "CampUpdate",
    "SeatRequest",
    "CampResponse",
    "NeedCreate",
    "NeedResponse",
    "OpenNeedResponse",
    "PledgeCreate",
    "PledgeResponse",
    "DeliveryStatusUpdate",
    "AssistanceResponse",
    "VolunteerCreate",
    "VolunteerResponse",
    "CampCard",
    "BadgedNeed",
    "CitizenDashboard",
    "CampAdminDashboard",
    "NGODashboard",
]
