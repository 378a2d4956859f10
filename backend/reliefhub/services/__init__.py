# Services
from reliefhub.services.profile_service import ProfileService, parse_role
from reliefhub.services.camp_service import CampService
from reliefhub.services.need_store import NeedStore
from reliefhub.services.assistance_ledger import AssistanceLedger
from reliefhub.services.fulfillment import FulfillmentCoordinator, PledgeResult
from reliefhub.services.volunteer_service import VolunteerService
from reliefhub.services.dashboard import DashboardService, urgency_badge

__all__ = [
    "ProfileService",
    "parse_role",
    "CampService",
    "NeedStore",
    "AssistanceLedger",
    "FulfillmentCoordinator",
    "PledgeResult",
    "VolunteerService",
    "DashboardService",
    "urgency_badge",
]
