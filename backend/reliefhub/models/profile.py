from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from reliefhub.core.database import Base
from reliefhub.core.types import GUID, enum_check


class ProfileRole(str, enum.Enum):
    """Roles a profile can hold, fixed at creation"""
    USER = "user"
    CAMP = "camp"
    NGO = "ngo"


class Profile(Base):
    """
    Profile of an identity-provider account.

    `id` is the provider's subject, so there is no local default.
    """
    __tablename__ = "profiles"

    __table_args__ = (
        enum_check("role", ProfileRole, "ck_profiles_role"),
    )

    id = Column(GUID, primary_key=True)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=True)
    role = Column(String(10), nullable=False, default=ProfileRole.USER.value)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    camps = relationship("Camp", back_populates="admin", cascade="all, delete-orphan")
    volunteer_registrations = relationship("Volunteer", back_populates="user", cascade="all, delete-orphan")
    assistance_entries = relationship("Assistance", back_populates="ngo", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Profile {self.id} ({self.role})>"
