from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from typing import Optional
from datetime import datetime

from reliefhub.models.camp import CampStatus


class CampCreate(BaseModel):
    """Schema for creating a camp (camp admins only)"""
    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    total_capacity: int = Field(..., ge=0, description="Total seats in the camp")
    occupied_seats: int = Field(default=0, ge=0, description="Seats already taken")
    contact_phone: str = Field(..., min_length=1, max_length=32)
    contact_email: Optional[EmailStr] = None

    @model_validator(mode='after')
    def validate_occupancy(self):
        if self.occupied_seats > self.total_capacity:
            raise ValueError("Occupied seats cannot exceed total capacity")
        return self


class CampUpdate(BaseModel):
    """Schema for updating a camp (owner only); seats move via claim/release"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    total_capacity: Optional[int] = Field(None, ge=0)
    contact_phone: Optional[str] = Field(None, min_length=1, max_length=32)
    contact_email: Optional[EmailStr] = None
    status: Optional[CampStatus] = None


class SeatRequest(BaseModel):
    """Seats to claim or release"""
    seats: int = Field(default=1, gt=0)


class CampResponse(BaseModel):
    id: str
    camp_admin_id: str
    name: str
    location: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    total_capacity: int
    occupied_seats: int
    available_seats: int
    contact_phone: str
    contact_email: Optional[str] = None
    status: CampStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
