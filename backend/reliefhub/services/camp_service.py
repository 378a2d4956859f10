"""
Camp Service - camp CRUD and seat capacity

Seat counts only move through single conditional UPDATE statements
(`occupied_seats + n <= total_capacity`), so concurrent claims can never
push a camp past its capacity. A claim that loses the race raises
CapacityExceededError, which is retryable.

Write methods other than claim_seats end the session's transaction:
they commit on success and roll the session back on failure.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update, or_
from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.exceptions import (
    ActorRoleError,
    AuthorizationError,
    CampNotFoundError,
    CapacityExceededError,
    ValidationError,
)
from reliefhub.core.logging_config import logger
from reliefhub.models.camp import Camp, CampStatus
from reliefhub.models.profile import ProfileRole
from reliefhub.schemas.camp import CampCreate, CampUpdate
from reliefhub.schemas.profile import Actor

# Fields a camp admin may clear by sending null
NULLABLE_CAMP_FIELDS = {"latitude", "longitude", "contact_email"}


class CampService:
    """Service for camps and their seat capacity"""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ==================== READS ====================

    async def get_camp(self, camp_id: str) -> Optional[Camp]:
        return await self.db.get(Camp, camp_id, populate_existing=True)

    async def require_camp(self, camp_id: str) -> Camp:
        camp = await self.get_camp(camp_id)
        if not camp:
            raise CampNotFoundError(camp_id)
        return camp

    async def require_owned_camp(self, actor: Actor, camp_id: str) -> Camp:
        """Camp owned by the actor; AuthorizationError for anyone else"""
        camp = await self.require_camp(camp_id)
        if camp.camp_admin_id != actor.id:
            raise AuthorizationError("Only the camp's administrator can manage it")
        return camp

    async def list_active_camps(self, search: Optional[str] = None) -> List[Camp]:
        """Active camps, newest first, optionally filtered by name or location"""
        query = select(Camp).where(Camp.status == CampStatus.ACTIVE.value)

        if search and search.strip():
            term = f"%{search.strip()}%"
            query = query.where(or_(Camp.name.ilike(term), Camp.location.ilike(term)))

        result = await self.db.execute(query.order_by(Camp.created_at.desc()))
        return list(result.scalars().all())

    async def list_admin_camps(self, admin_id: str) -> List[Camp]:
        """Camps owned by an admin, newest first"""
        result = await self.db.execute(
            select(Camp)
            .where(Camp.camp_admin_id == admin_id)
            .order_by(Camp.created_at.desc())
        )
        return list(result.scalars().all())

    # ==================== WRITES ====================

    async def create_camp(self, actor: Actor, camp_data: CampCreate) -> Camp:
        if actor.role != ProfileRole.CAMP:
            raise ActorRoleError(ProfileRole.CAMP.value, actor.role.value)

        if camp_data.occupied_seats > camp_data.total_capacity:
            raise ValidationError("Occupied seats cannot exceed total capacity", field="occupied_seats")

        name = camp_data.name.strip()
        location = camp_data.location.strip()
        if not name:
            raise ValidationError("Camp name is required", field="name")
        if not location:
            raise ValidationError("Camp location is required", field="location")

        camp = Camp(
            camp_admin_id=actor.id,
            name=name,
            location=location,
            latitude=camp_data.latitude,
            longitude=camp_data.longitude,
            total_capacity=camp_data.total_capacity,
            occupied_seats=camp_data.occupied_seats,
            contact_phone=camp_data.contact_phone,
            contact_email=camp_data.contact_email,
            status=CampStatus.ACTIVE.value,
        )
        self.db.add(camp)
        await self.db.commit()
        await self.db.refresh(camp)

        logger.info(f"Created camp {camp.id} '{camp.name}' for admin {actor.id}")
        return camp

    async def update_camp(self, actor: Actor, camp_id: str, update_data: CampUpdate) -> Camp:
        """Update camp details; capacity may not drop below occupied seats"""
        await self.require_owned_camp(actor, camp_id)

        changes = {
            field: value
            for field, value in update_data.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_CAMP_FIELDS
        }
        for field in ("name", "location"):
            if field in changes:
                changes[field] = changes[field].strip()
                if not changes[field]:
                    raise ValidationError(f"Camp {field} cannot be blank", field=field)
        if "status" in changes:
            changes["status"] = CampStatus(changes["status"]).value
        if not changes:
            return await self.require_camp(camp_id)

        stmt = update(Camp).where(Camp.id == camp_id)
        new_capacity = changes.get("total_capacity")
        if new_capacity is not None:
            stmt = stmt.where(Camp.occupied_seats <= new_capacity)

        result = await self.db.execute(
            stmt.values(**changes, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            await self.db.rollback()
            camp = await self.require_camp(camp_id)
            raise ValidationError(
                f"Total capacity {new_capacity} is below the {camp.occupied_seats} occupied seats",
                field="total_capacity",
            )

        await self.db.commit()
        camp = await self.require_camp(camp_id)
        logger.info(f"Updated camp {camp_id}: {', '.join(changes)}")
        return camp

    async def claim_seats(self, camp_id: str, seats: int = 1) -> Camp:
        """
        Atomically take `seats` seats in a camp.

        Runs inside the caller's transaction and does not commit.
        """
        if seats <= 0:
            raise ValidationError("Seats must be a positive number", field="seats")

        result = await self.db.execute(
            update(Camp)
            .where(
                Camp.id == camp_id,
                Camp.status != CampStatus.INACTIVE.value,
                Camp.occupied_seats + seats <= Camp.total_capacity,
            )
            .values(occupied_seats=Camp.occupied_seats + seats, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )

        camp = await self.get_camp(camp_id)
        if result.rowcount == 0:
            if camp is None:
                raise CampNotFoundError(camp_id)
            if camp.status == CampStatus.INACTIVE.value:
                raise ValidationError("Camp is not accepting people right now", field="camp_id")
            logger.log_capacity_event(camp_id, "claim", seats, accepted=False,
                                      available=camp.available_seats)
            raise CapacityExceededError(camp_id, seats, camp.available_seats)

        logger.log_capacity_event(camp_id, "claim", seats, accepted=True,
                                  occupied=camp.occupied_seats, total=camp.total_capacity)
        return camp

    async def admit(self, actor: Actor, camp_id: str, seats: int = 1) -> Camp:
        """Camp admin records people joining the camp"""
        await self.require_owned_camp(actor, camp_id)
        try:
            camp = await self.claim_seats(camp_id, seats)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return camp

    async def release_seats(self, actor: Actor, camp_id: str, seats: int = 1) -> Camp:
        """Camp admin records people leaving; occupancy never goes below zero"""
        if seats <= 0:
            raise ValidationError("Seats must be a positive number", field="seats")
        await self.require_owned_camp(actor, camp_id)

        result = await self.db.execute(
            update(Camp)
            .where(Camp.id == camp_id, Camp.occupied_seats >= seats)
            .values(occupied_seats=Camp.occupied_seats - seats, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            await self.db.rollback()
            camp = await self.require_camp(camp_id)
            logger.log_capacity_event(camp_id, "release", seats, accepted=False)
            raise ValidationError(
                f"Cannot release {seats} seat(s); only {camp.occupied_seats} occupied",
                field="seats",
            )

        await self.db.commit()
        camp = await self.require_camp(camp_id)
        logger.log_capacity_event(camp_id, "release", seats, accepted=True,
                                  occupied=camp.occupied_seats, total=camp.total_capacity)
        return camp
