"""
Fulfillment Coordinator

An NGO pledge is one unit of work: increment the need (checked against
the remaining quantity in the same statement), then append the ledger
entry, then commit. If any step fails the transaction is rolled back, so
a ledger row never exists without its increment and vice versa.

The coordinator owns the session's transaction. A rejected pledge rolls
back the whole session and expires its loaded objects, so hand it a
request-scoped session with no other pending work.
"""

from typing import NamedTuple, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.exceptions import ActorRoleError, ReliefHubError, ValidationError
from reliefhub.core.logging_config import logger
from reliefhub.models.assistance import Assistance
from reliefhub.models.need import CampNeed
from reliefhub.models.profile import ProfileRole
from reliefhub.schemas.profile import Actor
from reliefhub.services.assistance_ledger import AssistanceLedger
from reliefhub.services.need_store import NeedStore


class PledgeResult(NamedTuple):
    need: CampNeed
    assistance: Assistance


class FulfillmentCoordinator:
    """Applies NGO pledges against camp needs"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.needs = NeedStore(db)
        self.ledger = AssistanceLedger(db)

    async def pledge_assistance(
        self,
        need_id: str,
        actor: Actor,
        quantity: int,
        notes: Optional[str] = None,
    ) -> PledgeResult:
        """
        Pledge `quantity` units of a need's item on behalf of an NGO.

        Raises:
            ActorRoleError: actor is not an NGO
            ValidationError: quantity is not a positive integer
            NeedNotFoundError: need does not exist
            OverCommitError: quantity exceeds what is still needed (retryable)
        """
        if actor.role != ProfileRole.NGO:
            raise ActorRoleError(ProfileRole.NGO.value, actor.role.value)

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Quantity must be a positive whole number", field="quantity")

        try:
            need = await self.needs.apply_fulfillment(need_id, quantity)
            entry = await self.ledger.record(
                ngo_id=actor.id,
                camp_id=need.camp_id,
                need_id=need.id,
                items_provided=need.item_name,
                quantity=quantity,
                notes=notes,
            )
            await self.db.commit()
        except ReliefHubError as e:
            await self.db.rollback()
            logger.log_pledge(need_id, actor.id, quantity, accepted=False, reason=e.code)
            raise
        except Exception as e:
            await self.db.rollback()
            logger.log_error_with_context(e, context="pledge_assistance", need_id=need_id)
            raise

        logger.log_pledge(
            need_id,
            actor.id,
            quantity,
            accepted=True,
            assistance_id=entry.id,
            fulfilled=need.quantity_fulfilled,
            needed=need.quantity_needed,
            status=need.status,
        )
        return PledgeResult(need=need, assistance=entry)
