from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import datetime

from reliefhub.models.volunteer import VolunteerType, VolunteerStatus


class VolunteerCreate(BaseModel):
    """Schema for registering the caller as a volunteer"""
    camp_id: Optional[str] = None
    volunteer_type: VolunteerType = VolunteerType.CAMP_VOLUNTEER
    skills: Optional[str] = Field(None, max_length=2000)
    availability: Optional[str] = Field(None, max_length=500)

    @model_validator(mode='after')
    def validate_camp_for_camp_volunteer(self):
        if self.volunteer_type == VolunteerType.CAMP_VOLUNTEER and not self.camp_id:
            raise ValueError("camp_id is required for camp volunteers")
        return self


class VolunteerResponse(BaseModel):
    id: str
    user_id: str
    camp_id: Optional[str] = None
    volunteer_type: VolunteerType
    skills: Optional[str] = None
    availability: Optional[str] = None
    status: VolunteerStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
