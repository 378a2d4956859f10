from sqlalchemy import Column, String, DateTime, ForeignKey, Text, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from reliefhub.core.database import Base
from reliefhub.core.types import GUID, generate_uuid, enum_check


class VolunteerType(str, enum.Enum):
    """Kind of help a volunteer offers"""
    CAMP_VOLUNTEER = "camp_volunteer"
    TRANSPORTATION = "transportation"
    GENERAL = "general"


class VolunteerStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Volunteer(Base):
    """Volunteer registration; (user, camp, type) is unique"""
    __tablename__ = "volunteers"

    __table_args__ = (
        UniqueConstraint("user_id", "camp_id", "volunteer_type", name="uq_volunteers_user_camp_type"),
        enum_check("volunteer_type", VolunteerType, "ck_volunteers_type"),
        enum_check("status", VolunteerStatus, "ck_volunteers_status"),
        Index("ix_volunteers_camp", "camp_id"),
    )

    id = Column(GUID, primary_key=True, default=generate_uuid)
    user_id = Column(GUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    camp_id = Column(GUID, ForeignKey("camps.id", ondelete="CASCADE"), nullable=True)

    volunteer_type = Column(String(30), nullable=False)
    skills = Column(Text, nullable=True)
    availability = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=VolunteerStatus.ACTIVE.value)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("Profile", back_populates="volunteer_registrations")
    camp = relationship("Camp", back_populates="volunteers")

    def __repr__(self):
        return f"<Volunteer {self.user_id} {self.volunteer_type} @ {self.camp_id}>"
