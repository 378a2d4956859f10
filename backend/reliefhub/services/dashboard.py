"""
Dashboard Service - per-role views assembled from the stores
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.exceptions import ActorRoleError
from reliefhub.models.camp import Camp
from reliefhub.models.need import NeedUrgency
from reliefhub.models.profile import ProfileRole
from reliefhub.schemas.camp import CampResponse
from reliefhub.schemas.dashboard import (
    BadgedNeed,
    CampAdminDashboard,
    CampCard,
    CitizenDashboard,
    NGODashboard,
)
from reliefhub.schemas.need import NeedResponse, OpenNeedResponse
from reliefhub.schemas.profile import Actor
from reliefhub.services.camp_service import CampService
from reliefhub.services.need_store import NeedStore


URGENCY_BADGES = {
    NeedUrgency.CRITICAL.value: "destructive",
    NeedUrgency.HIGH.value: "warning",
    NeedUrgency.MEDIUM.value: "default",
}


def urgency_badge(urgency) -> str:
    """Badge variant for an urgency; low and unknown values are secondary"""
    value = urgency.value if isinstance(urgency, NeedUrgency) else urgency
    return URGENCY_BADGES.get(value, "secondary")


def camp_card(camp: Camp) -> CampCard:
    data = CampResponse.model_validate(camp).model_dump()
    return CampCard(**data, is_full=camp.available_seats <= 0)


class DashboardService:
    """Builds the citizen, camp admin and NGO dashboards"""

    def __init__(self, db: AsyncSession):
        self.camps = CampService(db)
        self.needs = NeedStore(db)

    async def citizen(self, search: Optional[str] = None) -> CitizenDashboard:
        camps = await self.camps.list_active_camps(search)
        return CitizenDashboard(camps=[camp_card(c) for c in camps], search=search or None)

    async def camp_admin(self, actor: Actor, camp_id: Optional[str] = None) -> CampAdminDashboard:
        if actor.role != ProfileRole.CAMP:
            raise ActorRoleError(ProfileRole.CAMP.value, actor.role.value)

        camps = await self.camps.list_admin_camps(actor.id)
        if camp_id:
            selected = await self.camps.require_owned_camp(actor, camp_id)
        else:
            selected = camps[0] if camps else None

        needs = await self.needs.list_by_camp(selected.id) if selected else []
        return CampAdminDashboard(
            camps=[CampResponse.model_validate(c) for c in camps],
            selected_camp=CampResponse.model_validate(selected) if selected else None,
            needs=[
                BadgedNeed(**NeedResponse.model_validate(n).model_dump(), badge=urgency_badge(n.urgency))
                for n in needs
            ],
        )

    async def ngo(self, actor: Actor) -> NGODashboard:
        if actor.role != ProfileRole.NGO:
            raise ActorRoleError(ProfileRole.NGO.value, actor.role.value)

        camps = await self.camps.list_active_camps()
        open_needs = await self.needs.list_open()
        return NGODashboard(
            camps=[camp_card(c) for c in camps],
            needs=[open_need(n, c) for n, c in open_needs],
        )


def open_need(need, camp: Camp) -> OpenNeedResponse:
    return OpenNeedResponse(
        **NeedResponse.model_validate(need).model_dump(),
        camp_name=camp.name,
        camp_location=camp.location,
        badge=urgency_badge(need.urgency),
    )
