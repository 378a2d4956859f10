from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from reliefhub.core.database import get_db
from reliefhub.modules.auth.dependencies import get_current_actor, require_ngo
from reliefhub.schemas.assistance import AssistanceResponse, DeliveryStatusUpdate
from reliefhub.schemas.profile import Actor
from reliefhub.services.assistance_ledger import AssistanceLedger

router = APIRouter()


@router.get("/mine", response_model=List[AssistanceResponse])
async def list_my_assistance(
    actor: Actor = Depends(require_ngo),
    db: AsyncSession = Depends(get_db)
):
    """Pledges made by the calling NGO, newest first"""
    return await AssistanceLedger(db).list_by_ngo(actor.id)


@router.patch("/{entry_id}/delivery-status", response_model=AssistanceResponse)
async def advance_delivery_status(
    entry_id: str,
    update: DeliveryStatusUpdate,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Move a pledge forward: pledged -> in_transit -> delivered"""
    return await AssistanceLedger(db).advance_delivery_status(entry_id, update.delivery_status, actor)
