"""
Volunteer Registry

A (user, camp, type) registration exists at most once. Camp volunteers
take a seat in the camp, claimed in the same transaction as the
registration row.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.exceptions import CampNotFoundError, DuplicateRegistrationError, ValidationError
from reliefhub.core.logging_config import logger
from reliefhub.models.camp import Camp
from reliefhub.models.volunteer import Volunteer, VolunteerStatus, VolunteerType
from reliefhub.schemas.profile import Actor
from reliefhub.schemas.volunteer import VolunteerCreate
from reliefhub.services.camp_service import CampService


class VolunteerService:
    """Service for volunteer registrations"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.camps = CampService(db)

    async def _exists(self, user_id: str, camp_id, volunteer_type: VolunteerType) -> bool:
        camp_clause = Volunteer.camp_id.is_(None) if camp_id is None else Volunteer.camp_id == camp_id
        result = await self.db.execute(
            select(Volunteer.id).where(
                Volunteer.user_id == user_id,
                camp_clause,
                Volunteer.volunteer_type == volunteer_type.value,
            )
        )
        return result.first() is not None

    async def register(self, actor: Actor, data: VolunteerCreate) -> Volunteer:
        """
        Register the actor as a volunteer.

        Raises:
            CampNotFoundError: camp_id names no camp
            DuplicateRegistrationError: same user, camp and type already registered
            CapacityExceededError: camp volunteer for a full camp
        """
        volunteer_type = VolunteerType(data.volunteer_type)
        if volunteer_type == VolunteerType.CAMP_VOLUNTEER and not data.camp_id:
            raise ValidationError("camp_id is required for camp volunteers", field="camp_id")

        if data.camp_id:
            camp = await self.db.get(Camp, data.camp_id)
            if not camp:
                raise CampNotFoundError(data.camp_id)

        if await self._exists(actor.id, data.camp_id, volunteer_type):
            raise DuplicateRegistrationError(actor.id, data.camp_id, volunteer_type.value)

        volunteer = Volunteer(
            user_id=actor.id,
            camp_id=data.camp_id,
            volunteer_type=volunteer_type.value,
            skills=data.skills,
            availability=data.availability,
            status=VolunteerStatus.ACTIVE.value,
        )

        try:
            if volunteer_type == VolunteerType.CAMP_VOLUNTEER:
                await self.camps.claim_seats(data.camp_id, 1)
            self.db.add(volunteer)
            await self.db.flush()
            await self.db.commit()
        except IntegrityError:
            # Lost a race with an identical registration
            await self.db.rollback()
            raise DuplicateRegistrationError(actor.id, data.camp_id, volunteer_type.value)
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(volunteer)
        logger.info(
            f"Volunteer {actor.id} registered as {volunteer_type.value}"
            + (f" at camp {data.camp_id}" if data.camp_id else "")
        )
        return volunteer

    async def list_for_user(self, user_id: str) -> List[Volunteer]:
        result = await self.db.execute(
            select(Volunteer)
            .where(Volunteer.user_id == user_id)
            .order_by(Volunteer.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_for_camp(self, camp_id: str) -> List[Volunteer]:
        result = await self.db.execute(
            select(Volunteer)
            .where(Volunteer.camp_id == camp_id)
            .order_by(Volunteer.created_at.desc())
        )
        return list(result.scalars().all())
