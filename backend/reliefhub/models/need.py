from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from reliefhub.core.database import Base
from reliefhub.core.types import GUID, generate_uuid, enum_check


class NeedUrgency(str, enum.Enum):
    """Priority label on a need, used for sorting and badges"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class NeedStatus(str, enum.Enum):
    """Aggregate fulfillment state, derived from the quantities"""
    PENDING = "pending"
    PARTIAL = "partial"
    FULFILLED = "fulfilled"


# Higher number sorts first
URGENCY_RANK = {
    NeedUrgency.CRITICAL.value: 3,
    NeedUrgency.HIGH.value: 2,
    NeedUrgency.MEDIUM.value: 1,
    NeedUrgency.LOW.value: 0,
}


def need_status_for(quantity_fulfilled: int, quantity_needed: int) -> NeedStatus:
    """Status is a pure function of the two quantities"""
    if quantity_fulfilled >= quantity_needed:
        return NeedStatus.FULFILLED
    if quantity_fulfilled > 0:
        return NeedStatus.PARTIAL
    return NeedStatus.PENDING


class CampNeed(Base):
    """A camp's outstanding request for a quantity of one item"""
    __tablename__ = "camp_needs"

    __table_args__ = (
        CheckConstraint("quantity_needed > 0", name="ck_camp_needs_needed_positive"),
        CheckConstraint("quantity_fulfilled >= 0", name="ck_camp_needs_fulfilled_non_negative"),
        CheckConstraint("quantity_fulfilled <= quantity_needed", name="ck_camp_needs_no_overcommit"),
        enum_check("urgency", NeedUrgency, "ck_camp_needs_urgency"),
        enum_check("status", NeedStatus, "ck_camp_needs_status"),
        Index("ix_camp_needs_camp", "camp_id"),
        Index("ix_camp_needs_status", "status"),
    )

    id = Column(GUID, primary_key=True, default=generate_uuid)
    camp_id = Column(GUID, ForeignKey("camps.id", ondelete="CASCADE"), nullable=False)

    item_name = Column(String(255), nullable=False)
    quantity_needed = Column(Integer, nullable=False)
    quantity_fulfilled = Column(Integer, nullable=False, default=0)

    urgency = Column(String(20), nullable=False, default=NeedUrgency.MEDIUM.value)
    status = Column(String(20), nullable=False, default=NeedStatus.PENDING.value)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    camp = relationship("Camp", back_populates="needs")
    assistance_entries = relationship("Assistance", back_populates="need", passive_deletes=True)

    @property
    def remaining(self) -> int:
        return max(self.quantity_needed - (self.quantity_fulfilled or 0), 0)

    def __repr__(self):
        return f"<CampNeed {self.item_name} {self.quantity_fulfilled}/{self.quantity_needed} ({self.status})>"
