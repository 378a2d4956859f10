"""
Assistance Ledger - append-only record of NGO pledges and deliveries

Entries are only ever inserted and then walked forward through
pledged -> in_transit -> delivered. Nothing else on an entry changes.

`record` joins the caller's transaction; `advance_delivery_status`
commits, or rolls the session back on a lost race.
"""

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.exceptions import (
    AssistanceNotFoundError,
    AuthorizationError,
    InvalidTransitionError,
    ValidationError,
)
from reliefhub.core.logging_config import logger
from reliefhub.models.assistance import Assistance, DeliveryStatus, NEXT_DELIVERY_STATUS
from reliefhub.schemas.profile import Actor


class AssistanceLedger:
    """Service for the NGO assistance ledger"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def record(
        self,
        ngo_id: str,
        camp_id: str,
        need_id: Optional[str],
        items_provided: str,
        quantity: int,
        notes: Optional[str] = None,
    ) -> Assistance:
        """
        Append a `pledged` entry.

        Flushes inside the caller's transaction and does not commit, so the
        entry lands together with the need increment or not at all.
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero", field="quantity")

        entry = Assistance(
            ngo_id=ngo_id,
            camp_id=camp_id,
            need_id=need_id,
            items_provided=items_provided,
            quantity=quantity,
            delivery_status=DeliveryStatus.PLEDGED.value,
            notes=notes,
        )
        self.db.add(entry)
        await self.db.flush()
        return entry

    async def get(self, entry_id: str) -> Optional[Assistance]:
        return await self.db.get(Assistance, entry_id, populate_existing=True)

    async def advance_delivery_status(self, entry_id: str, next_status: str, actor: Actor) -> Assistance:
        """
        Move an entry one step along pledged -> in_transit -> delivered.

        Only the NGO that made the pledge may advance it. Skips, reversals
        and moves out of `delivered` raise InvalidTransitionError.
        """
        entry = await self.get(entry_id)
        if not entry:
            raise AssistanceNotFoundError(entry_id)

        if entry.ngo_id != actor.id:
            raise AuthorizationError("Only the NGO that made the pledge can update it")

        requested = next_status.value if isinstance(next_status, DeliveryStatus) else str(next_status)
        current = entry.delivery_status
        if NEXT_DELIVERY_STATUS.get(current) != requested:
            raise InvalidTransitionError(current, requested)

        # Guard on the current value so two concurrent advances cannot both apply
        result = await self.db.execute(
            update(Assistance)
            .where(Assistance.id == entry_id, Assistance.delivery_status == current)
            .values(delivery_status=requested)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            latest = await self.get(entry_id)
            raise InvalidTransitionError(latest.delivery_status if latest else current, requested)

        await self.db.commit()
        entry = await self.get(entry_id)

        logger.info(
            f"Assistance {entry_id} moved {current} -> {requested}",
            extra={
                "event_type": "delivery_status",
                "assistance_id": entry_id,
                "from_status": current,
                "to_status": requested,
            }
        )
        return entry

    async def list_by_ngo(self, ngo_id: str) -> List[Assistance]:
        return await self._list(Assistance.ngo_id == ngo_id)

    async def list_by_camp(self, camp_id: str) -> List[Assistance]:
        return await self._list(Assistance.camp_id == camp_id)

    async def list_by_need(self, need_id: str) -> List[Assistance]:
        return await self._list(Assistance.need_id == need_id)

    async def _list(self, condition) -> List[Assistance]:
        result = await self.db.execute(
            select(Assistance).where(condition).order_by(Assistance.created_at.desc())
        )
        return list(result.scalars().all())
