from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from reliefhub.models.need import NeedUrgency, NeedStatus


class NeedCreate(BaseModel):
    """Schema for a camp admin adding a need"""
    item_name: str = Field(..., min_length=1, max_length=255)
    quantity_needed: int = Field(..., gt=0)
    urgency: NeedUrgency = NeedUrgency.MEDIUM


class NeedResponse(BaseModel):
    id: str
    camp_id: str
    item_name: str
    quantity_needed: int
    quantity_fulfilled: int
    remaining: int
    urgency: NeedUrgency
    status: NeedStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OpenNeedResponse(NeedResponse):
    """Need with the owning camp's name/location (NGO view)"""
    camp_name: str
    camp_location: str
    badge: Optional[str] = None
