from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from reliefhub.core.database import get_db
from reliefhub.core.rate_limiter import pledge_rate_limit
from reliefhub.modules.auth.dependencies import get_current_actor
from reliefhub.schemas.assistance import AssistanceResponse, PledgeCreate, PledgeResponse
from reliefhub.schemas.need import NeedResponse, OpenNeedResponse
from reliefhub.schemas.profile import Actor
from reliefhub.services.dashboard import open_need
from reliefhub.services.fulfillment import FulfillmentCoordinator
from reliefhub.services.need_store import NeedStore

router = APIRouter()


@router.get("/open", response_model=List[OpenNeedResponse])
async def list_open_needs(
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """Needs not yet fulfilled across all camps, most urgent first"""
    return [open_need(need, camp) for need, camp in await NeedStore(db).list_open()]


@router.get("/{need_id}", response_model=NeedResponse)
async def get_need(
    need_id: str,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    return await NeedStore(db).require(need_id)


@router.post("/{need_id}/pledges", response_model=PledgeResponse, status_code=status.HTTP_201_CREATED)
@pledge_rate_limit()
async def pledge_to_need(
    request: Request,
    need_id: str,
    pledge: PledgeCreate,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db)
):
    """
    Pledge assistance against a need (NGOs only).

    409 with `retryable: true` when the quantity exceeds what is still
    needed; re-read the need and retry with a smaller quantity.
    """
    result = await FulfillmentCoordinator(db).pledge_assistance(
        need_id, actor, pledge.quantity, pledge.notes
    )
    return PledgeResponse(
        message=f"Pledged {pledge.quantity} {result.need.item_name}",
        need=NeedResponse.model_validate(result.need),
        assistance=AssistanceResponse.model_validate(result.assistance),
    )
