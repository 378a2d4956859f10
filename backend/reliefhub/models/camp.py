from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Numeric, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from reliefhub.core.database import Base
from reliefhub.core.types import GUID, generate_uuid, enum_check


class CampStatus(str, enum.Enum):
    """Camp visibility / intake status"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    FULL = "full"


class Camp(Base):
    """
    Relief camp owned by exactly one camp admin.

    0 <= occupied_seats <= total_capacity is enforced both by CHECK
    constraints and by the conditional seat updates in CampService.
    """
    __tablename__ = "camps"

    __table_args__ = (
        CheckConstraint("total_capacity >= 0", name="ck_camps_capacity_non_negative"),
        CheckConstraint("occupied_seats >= 0", name="ck_camps_occupied_non_negative"),
        CheckConstraint("occupied_seats <= total_capacity", name="ck_camps_occupied_within_capacity"),
        enum_check("status", CampStatus, "ck_camps_status"),
        Index("ix_camps_admin", "camp_admin_id"),
        Index("ix_camps_status", "status"),
    )

    id = Column(GUID, primary_key=True, default=generate_uuid)
    camp_admin_id = Column(GUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)

    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    latitude = Column(Numeric(10, 8), nullable=True)
    longitude = Column(Numeric(11, 8), nullable=True)

    total_capacity = Column(Integer, nullable=False, default=0)
    occupied_seats = Column(Integer, nullable=False, default=0)

    contact_phone = Column(String(32), nullable=False)
    contact_email = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=CampStatus.ACTIVE.value)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    admin = relationship("Profile", back_populates="camps")
    needs = relationship("CampNeed", back_populates="camp", cascade="all, delete-orphan", passive_deletes=True)
    volunteers = relationship("Volunteer", back_populates="camp", cascade="all, delete-orphan", passive_deletes=True)
    assistance_entries = relationship("Assistance", back_populates="camp", cascade="all, delete-orphan", passive_deletes=True)

    @property
    def available_seats(self) -> int:
        return max((self.total_capacity or 0) - (self.occupied_seats or 0), 0)

    def __repr__(self):
        return f"<Camp {self.name} ({self.occupied_seats}/{self.total_capacity})>"
