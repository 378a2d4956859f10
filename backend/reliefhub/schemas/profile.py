from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from reliefhub.models.profile import ProfileRole


class Actor(BaseModel):
    """Resolved caller: identity-provider subject plus the profile's role"""
    id: str
    role: ProfileRole

    model_config = ConfigDict(frozen=True)

    @property
    def is_ngo(self) -> bool:
        return self.role == ProfileRole.NGO

    @property
    def is_camp_admin(self) -> bool:
        return self.role == ProfileRole.CAMP


class ProfileCreate(BaseModel):
    """Sign-up metadata used to provision a profile"""
    full_name: str = Field(default="User", min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    role: ProfileRole = ProfileRole.USER


class ProfileUpdate(BaseModel):
    """Editable profile fields; role is fixed at creation"""
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    role: Optional[ProfileRole] = None


class ProfileResponse(BaseModel):
    id: str
    full_name: str
    phone: Optional[str] = None
    role: ProfileRole
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
