"""
Need Record Store - camp needs and their fulfillment state

`apply_fulfillment` is the only way quantity_fulfilled/status change. It
is one conditional UPDATE that checks the remaining quantity, increments
it and recomputes the status in the same statement, so two concurrent
callers cannot both pass the check. Overshooting deltas are rejected,
never clamped.
"""

from typing import List, Optional, Tuple

from sqlalchemy import case, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.exceptions import (
    ActorRoleError,
    AuthorizationError,
    CampNotFoundError,
    NeedNotFoundError,
    OverCommitError,
    ValidationError,
)
from reliefhub.core.logging_config import logger
from reliefhub.models.camp import Camp
from reliefhub.models.need import CampNeed, NeedStatus, NeedUrgency, URGENCY_RANK
from reliefhub.models.profile import ProfileRole
from reliefhub.schemas.profile import Actor


# Most urgent first
urgency_order = case(URGENCY_RANK, value=CampNeed.urgency, else_=-1).desc()


def parse_urgency(value) -> NeedUrgency:
    try:
        return NeedUrgency(value)
    except ValueError:
        raise ValidationError(
            f"Invalid urgency '{value}'. Must be one of: {', '.join(u.value for u in NeedUrgency)}",
            field="urgency",
        )


class NeedStore:
    """Reads and the single mutator for camp needs"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, need_id: str) -> Optional[CampNeed]:
        return await self.db.get(CampNeed, need_id, populate_existing=True)

    async def require(self, need_id: str) -> CampNeed:
        need = await self.get(need_id)
        if not need:
            raise NeedNotFoundError(need_id)
        return need

    async def list_by_camp(self, camp_id: str) -> List[CampNeed]:
        result = await self.db.execute(
            select(CampNeed)
            .where(CampNeed.camp_id == camp_id)
            .order_by(urgency_order, CampNeed.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_open(self) -> List[Tuple[CampNeed, Camp]]:
        """Needs not yet fulfilled, with their camp, most urgent first"""
        result = await self.db.execute(
            select(CampNeed, Camp)
            .join(Camp, CampNeed.camp_id == Camp.id)
            .where(CampNeed.status != NeedStatus.FULFILLED.value)
            .order_by(urgency_order, CampNeed.created_at.desc())
        )
        return [(need, camp) for need, camp in result.all()]

    async def create(
        self,
        actor: Actor,
        camp_id: str,
        item_name: str,
        quantity_needed: int,
        urgency=NeedUrgency.MEDIUM,
    ) -> CampNeed:
        """Add a need to a camp the actor administers"""
        if actor.role != ProfileRole.CAMP:
            raise ActorRoleError(ProfileRole.CAMP.value, actor.role.value)

        if not item_name or not item_name.strip():
            raise ValidationError("Item name is required", field="item_name")
        if quantity_needed <= 0:
            raise ValidationError("Quantity needed must be greater than zero", field="quantity_needed")
        urgency = parse_urgency(urgency)

        camp = await self.db.get(Camp, camp_id)
        if not camp:
            raise CampNotFoundError(camp_id)
        if camp.camp_admin_id != actor.id:
            raise AuthorizationError("Only the camp's administrator can add needs")

        need = CampNeed(
            camp_id=camp_id,
            item_name=item_name.strip(),
            quantity_needed=quantity_needed,
            quantity_fulfilled=0,
            urgency=urgency.value,
            status=NeedStatus.PENDING.value,
        )
        self.db.add(need)
        await self.db.commit()
        await self.db.refresh(need)

        logger.info(f"Need {need.id} added to camp {camp_id}: {need.item_name} x{quantity_needed} ({urgency.value})")
        return need

    async def apply_fulfillment(self, need_id: str, delta_quantity: int) -> CampNeed:
        """
        Atomically add `delta_quantity` to a need and recompute its status.

        Runs inside the caller's transaction and does not commit.

        Raises:
            ValidationError: delta is not positive
            NeedNotFoundError: need does not exist
            OverCommitError: delta exceeds the remaining quantity right now
        """
        if delta_quantity <= 0:
            raise ValidationError("Quantity must be greater than zero", field="quantity")

        new_fulfilled = CampNeed.quantity_fulfilled + delta_quantity
        result = await self.db.execute(
            update(CampNeed)
            .where(
                CampNeed.id == need_id,
                new_fulfilled <= CampNeed.quantity_needed,
            )
            .values(
                quantity_fulfilled=new_fulfilled,
                status=case(
                    (new_fulfilled >= CampNeed.quantity_needed, NeedStatus.FULFILLED.value),
                    (new_fulfilled > 0, NeedStatus.PARTIAL.value),
                    else_=NeedStatus.PENDING.value,
                ),
            )
            .execution_options(synchronize_session=False)
        )

        need = await self.get(need_id)
        if result.rowcount == 0:
            if need is None:
                raise NeedNotFoundError(need_id)
            raise OverCommitError(delta_quantity, need.remaining)

        return need
