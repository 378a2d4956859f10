from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from reliefhub.core.database import get_db
from reliefhub.modules.auth.dependencies import get_current_actor
from reliefhub.schemas.profile import Actor
from reliefhub.schemas.volunteer import VolunteerCreate, VolunteerResponse
from reliefhub.services.volunteer_service import VolunteerService

router = APIRouter()


@router.post("", response_model=VolunteerResponse, status_code=status.HTTP_201_CREATED)
async def register_volunteer(
    data: VolunteerCreate,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Register the caller as a volunteer; camp volunteers take one seat"""
    return await VolunteerService(db).register(actor, data)


@router.get("/mine", response_model=List[VolunteerResponse])
async def list_my_registrations(
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await VolunteerService(db).list_for_user(actor.id)
