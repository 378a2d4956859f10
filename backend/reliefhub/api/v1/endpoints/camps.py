from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from reliefhub.core.database import get_db
from reliefhub.modules.auth.dependencies import get_current_actor, require_camp_admin
from reliefhub.schemas.assistance import AssistanceResponse
from reliefhub.schemas.camp import CampCreate, CampResponse, CampUpdate, SeatRequest
from reliefhub.schemas.need import NeedCreate, NeedResponse
from reliefhub.schemas.profile import Actor
from reliefhub.schemas.volunteer import VolunteerResponse
from reliefhub.services.assistance_ledger import AssistanceLedger
from reliefhub.services.camp_service import CampService
from reliefhub.services.need_store import NeedStore
from reliefhub.services.volunteer_service import VolunteerService

router = APIRouter()


@router.get("", response_model=List[CampResponse])
async def list_camps(
    search: Optional[str] = Query(None, description="Case-insensitive match on name or location"),
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Active camps, newest first"""
    return await CampService(db).list_active_camps(search)


@router.get("/mine", response_model=List[CampResponse])
async def list_my_camps(
    actor: Actor = Depends(require_camp_admin),
    db: AsyncSession = Depends(get_db)
):
    """Camps administered by the caller"""
    return await CampService(db).list_admin_camps(actor.id)


@router.post("", response_model=CampResponse, status_code=status.HTTP_201_CREATED)
async def create_camp(
    camp_data: CampCreate,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await CampService(db).create_camp(actor, camp_data)


@router.get("/{camp_id}", response_model=CampResponse)
async def get_camp(
    camp_id: str,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await CampService(db).require_camp(camp_id)


@router.patch("/{camp_id}", response_model=CampResponse)
async def update_camp(
    camp_id: str,
    update_data: CampUpdate,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await CampService(db).update_camp(actor, camp_id, update_data)


@router.post("/{camp_id}/seats/claim", response_model=CampResponse)
async def claim_seats(
    camp_id: str,
    seat_request: SeatRequest,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Record people joining the camp; 409 if not enough free seats"""
    return await CampService(db).admit(actor, camp_id, seat_request.seats)


@router.post("/{camp_id}/seats/release", response_model=CampResponse)
async def release_seats(
    camp_id: str,
    seat_request: SeatRequest,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Record people leaving the camp"""
    return await CampService(db).release_seats(actor, camp_id, seat_request.seats)


# ==================== Camp sub-resources ====================

@router.get("/{camp_id}/needs", response_model=List[NeedResponse])
async def list_camp_needs(
    camp_id: str,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Needs of a camp, most urgent first"""
    await CampService(db).require_camp(camp_id)
    return await NeedStore(db).list_by_camp(camp_id)


@router.post("/{camp_id}/needs", response_model=NeedResponse, status_code=status.HTTP_201_CREATED)
async def create_camp_need(
    camp_id: str,
    need_data: NeedCreate,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await NeedStore(db).create(
        actor,
        camp_id,
        item_name=need_data.item_name,
        quantity_needed=need_data.quantity_needed,
        urgency=need_data.urgency,
    )


@router.get("/{camp_id}/assistance", response_model=List[AssistanceResponse])
async def list_camp_assistance(
    camp_id: str,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Ledger entries for a camp (camp's administrator only)"""
    await CampService(db).require_owned_camp(actor, camp_id)
    return await AssistanceLedger(db).list_by_camp(camp_id)


@router.get("/{camp_id}/volunteers", response_model=List[VolunteerResponse])
async def list_camp_volunteers(
    camp_id: str,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Volunteers registered at a camp (camp's administrator only)"""
    await CampService(db).require_owned_camp(actor, camp_id)
    return await VolunteerService(db).list_for_camp(camp_id)
