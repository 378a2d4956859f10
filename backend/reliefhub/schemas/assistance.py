from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from reliefhub.models.assistance import DeliveryStatus
from reliefhub.schemas.need import NeedResponse


class PledgeCreate(BaseModel):
    """Schema for an NGO pledging against a need"""
    quantity: int = Field(..., description="Units pledged; must not exceed the remaining need")
    notes: Optional[str] = Field(None, max_length=2000)


class DeliveryStatusUpdate(BaseModel):
    delivery_status: DeliveryStatus


class AssistanceResponse(BaseModel):
    id: str
    ngo_id: str
    camp_id: str
    need_id: Optional[str] = None
    items_provided: str
    quantity: int
    delivery_status: DeliveryStatus
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PledgeResponse(BaseModel):
    """Updated need plus the new ledger entry"""
    success: bool = True
    message: str
    need: NeedResponse
    assistance: AssistanceResponse
