from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from reliefhub.core.database import get_db
from reliefhub.modules.auth.dependencies import get_current_actor
from reliefhub.schemas.dashboard import CampAdminDashboard, CitizenDashboard, NGODashboard
from reliefhub.schemas.profile import Actor
from reliefhub.services.dashboard import DashboardService

router = APIRouter()


@router.get("/citizen", response_model=CitizenDashboard)
async def citizen_dashboard(
    search: Optional[str] = Query(None),
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await DashboardService(db).citizen(search)


@router.get("/camp", response_model=CampAdminDashboard)
async def camp_admin_dashboard(
    camp_id: Optional[str] = Query(None, description="Camp to select; defaults to the newest"),
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await DashboardService(db).camp_admin(actor, camp_id)


@router.get("/ngo", response_model=NGODashboard)
async def ngo_dashboard(
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await DashboardService(db).ngo(actor)
