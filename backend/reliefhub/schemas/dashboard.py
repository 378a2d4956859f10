from pydantic import BaseModel
from typing import List, Optional

from reliefhub.schemas.camp import CampResponse
from reliefhub.schemas.need import NeedResponse, OpenNeedResponse


class CampCard(CampResponse):
    """Camp as listed to citizens"""
    is_full: bool


class BadgedNeed(NeedResponse):
    badge: str


class CitizenDashboard(BaseModel):
    camps: List[CampCard]
    search: Optional[str] = None


class CampAdminDashboard(BaseModel):
    camps: List[CampResponse]
    selected_camp: Optional[CampResponse] = None
    needs: List[BadgedNeed]


class NGODashboard(BaseModel):
    camps: List[CampCard]
    needs: List[OpenNeedResponse]
