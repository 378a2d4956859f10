from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Text, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from reliefhub.core.database import Base
from reliefhub.core.types import GUID, generate_uuid, enum_check


class DeliveryStatus(str, enum.Enum):
    """Delivery progress of a pledge"""
    PLEDGED = "pledged"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"


# The only legal edges; delivered is terminal
NEXT_DELIVERY_STATUS = {
    DeliveryStatus.PLEDGED.value: DeliveryStatus.IN_TRANSIT.value,
    DeliveryStatus.IN_TRANSIT.value: DeliveryStatus.DELIVERED.value,
}


class Assistance(Base):
    """
    Append-only ledger entry for a pledge/delivery by an NGO.

    Only delivery_status changes after insert. need_id is nulled if the
    need row is ever removed so the ledger keeps its history.
    """
    __tablename__ = "ngo_assistance"

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_ngo_assistance_quantity_positive"),
        enum_check("delivery_status", DeliveryStatus, "ck_ngo_assistance_delivery_status"),
        Index("ix_ngo_assistance_ngo", "ngo_id"),
        Index("ix_ngo_assistance_camp", "camp_id"),
        Index("ix_ngo_assistance_need", "need_id"),
    )

    id = Column(GUID, primary_key=True, default=generate_uuid)
    ngo_id = Column(GUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    camp_id = Column(GUID, ForeignKey("camps.id", ondelete="CASCADE"), nullable=False)
    need_id = Column(GUID, ForeignKey("camp_needs.id", ondelete="SET NULL"), nullable=True)

    items_provided = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    delivery_status = Column(String(20), nullable=False, default=DeliveryStatus.PLEDGED.value)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    ngo = relationship("Profile", back_populates="assistance_entries")
    camp = relationship("Camp", back_populates="assistance_entries")
    need = relationship("CampNeed", back_populates="assistance_entries")

    def __repr__(self):
        return f"<Assistance {self.items_provided} x{self.quantity} ({self.delivery_status})>"
