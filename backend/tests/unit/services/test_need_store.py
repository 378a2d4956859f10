"""
Unit Tests for NeedStore
"""
import pytest
from datetime import datetime, timedelta

from reliefhub.core.exceptions import (
    ActorRoleError,
    AuthorizationError,
    CampNotFoundError,
    NeedNotFoundError,
    OverCommitError,
    ValidationError,
)
from reliefhub.models import NeedStatus, NeedUrgency, ProfileRole
from reliefhub.services.need_store import NeedStore


class TestCreateNeed:

    @pytest.mark.asyncio
    async def test_owner_creates_need(self, db_session, camp, camp_admin_actor):
        need = await NeedStore(db_session).create(
            camp_admin_actor, camp.id, "Rice (kg)", 200, NeedUrgency.HIGH
        )

        assert need.id
        assert need.quantity_fulfilled == 0
        assert need.status == NeedStatus.PENDING.value
        assert need.urgency == NeedUrgency.HIGH.value

    @pytest.mark.asyncio
    async def test_accepts_urgency_string(self, db_session, camp, camp_admin_actor):
        need = await NeedStore(db_session).create(camp_admin_actor, camp.id, "Tents", 5, "critical")
        assert need.urgency == "critical"

    @pytest.mark.asyncio
    async def test_non_camp_role_rejected(self, db_session, camp, ngo_actor):
        with pytest.raises(ActorRoleError):
            await NeedStore(db_session).create(ngo_actor, camp.id, "Rice", 10)

    @pytest.mark.asyncio
    async def test_other_admin_rejected(self, db_session, camp, make_profile, as_actor):
        other = await make_profile(ProfileRole.CAMP)

        with pytest.raises(AuthorizationError):
            await NeedStore(db_session).create(as_actor(other), camp.id, "Rice", 10)

    @pytest.mark.asyncio
    async def test_unknown_camp(self, db_session, camp_admin_actor):
        with pytest.raises(CampNotFoundError):
            await NeedStore(db_session).create(camp_admin_actor, "no-such-camp", "Rice", 10)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -3])
    async def test_non_positive_quantity(self, db_session, camp, camp_admin_actor, quantity):
        with pytest.raises(ValidationError):
            await NeedStore(db_session).create(camp_admin_actor, camp.id, "Rice", quantity)

    @pytest.mark.asyncio
    async def test_unknown_urgency(self, db_session, camp, camp_admin_actor):
        with pytest.raises(ValidationError):
            await NeedStore(db_session).create(camp_admin_actor, camp.id, "Rice", 10, "whenever")


class TestApplyFulfillment:

    @pytest.mark.asyncio
    async def test_partial_then_full(self, db_session, need):
        store = NeedStore(db_session)

        updated = await store.apply_fulfillment(need.id, 4)
        assert updated.quantity_fulfilled == 4
        assert updated.status == NeedStatus.PARTIAL.value

        updated = await store.apply_fulfillment(need.id, 6)
        assert updated.quantity_fulfilled == 10
        assert updated.status == NeedStatus.FULFILLED.value

    @pytest.mark.asyncio
    async def test_overshoot_rejected_not_clamped(self, db_session, need):
        store = NeedStore(db_session)
        await store.apply_fulfillment(need.id, 8)

        with pytest.raises(OverCommitError) as exc_info:
            await store.apply_fulfillment(need.id, 3)

        assert exc_info.value.details == {"requested": 3, "remaining": 2}
        unchanged = await store.get(need.id)
        assert unchanged.quantity_fulfilled == 8
        assert unchanged.status == NeedStatus.PARTIAL.value

    @pytest.mark.asyncio
    async def test_missing_need(self, db_session):
        with pytest.raises(NeedNotFoundError):
            await NeedStore(db_session).apply_fulfillment("missing", 1)

    @pytest.mark.asyncio
    async def test_zero_delta_rejected(self, db_session, need):
        with pytest.raises(ValidationError):
            await NeedStore(db_session).apply_fulfillment(need.id, 0)


class TestListing:

    @pytest.mark.asyncio
    async def test_list_by_camp_most_urgent_first(self, db_session, camp, make_need):
        now = datetime.utcnow()
        await make_need(camp, item_name="Soap", urgency="low", created_at=now)
        await make_need(camp, item_name="Insulin", urgency="critical", created_at=now - timedelta(hours=2))
        await make_need(camp, item_name="Rice", urgency="medium", created_at=now)
        await make_need(camp, item_name="Water", urgency="high", created_at=now)

        needs = await NeedStore(db_session).list_by_camp(camp.id)

        assert [n.item_name for n in needs] == ["Insulin", "Water", "Rice", "Soap"]

    @pytest.mark.asyncio
    async def test_same_urgency_newest_first(self, db_session, camp, make_need):
        now = datetime.utcnow()
        await make_need(camp, item_name="Old", urgency="high", created_at=now - timedelta(days=1))
        await make_need(camp, item_name="New", urgency="high", created_at=now)

        needs = await NeedStore(db_session).list_by_camp(camp.id)

        assert [n.item_name for n in needs] == ["New", "Old"]

    @pytest.mark.asyncio
    async def test_list_open_excludes_fulfilled(self, db_session, camp, make_need):
        open_need = await make_need(camp, item_name="Blankets", quantity_needed=10, quantity_fulfilled=3,
                                    status="partial")
        await make_need(camp, item_name="Water", quantity_needed=5, quantity_fulfilled=5, status="fulfilled")

        rows = await NeedStore(db_session).list_open()

        assert [(n.id, c.id) for n, c in rows] == [(open_need.id, camp.id)]
