"""
Profile Service - profiles keyed by the identity provider's subject

A profile is created the first time a subject is seen, from the sign-up
metadata carried in its token. After that the stored role is the source
of truth; it is never reassigned.
"""

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.exceptions import ProfileNotFoundError, ValidationError
from reliefhub.core.logging_config import logger
from reliefhub.models.profile import Profile, ProfileRole
from reliefhub.schemas.profile import ProfileUpdate


def parse_role(value: Optional[str]) -> ProfileRole:
    """Map a sign-up role claim to a ProfileRole (default: user)"""
    if not value:
        return ProfileRole.USER
    try:
        return ProfileRole(value)
    except ValueError:
        raise ValidationError(
            f"Unknown role '{value}'. Must be one of: {', '.join(r.value for r in ProfileRole)}",
            field="role",
        )


class ProfileService:
    """Read, provision and edit profiles"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, profile_id: str) -> Optional[Profile]:
        result = await self.db.execute(select(Profile).where(Profile.id == profile_id))
        return result.scalar_one_or_none()

    async def get_or_provision(self, subject: str, claims: Dict[str, Any]) -> Profile:
        """Return the subject's profile, creating it from token claims if missing"""
        profile = await self.get(subject)
        if profile:
            return profile

        profile = Profile(
            id=subject,
            full_name=(claims.get("full_name") or "User").strip() or "User",
            role=parse_role(claims.get("role")).value,
            phone=claims.get("phone"),
        )
        self.db.add(profile)
        try:
            await self.db.commit()
        except IntegrityError:
            # Another request provisioned the same subject first
            await self.db.rollback()
            profile = await self.get(subject)
            if profile is None:
                raise
            return profile

        await self.db.refresh(profile)
        logger.info(f"Provisioned profile {profile.id} with role {profile.role}")
        return profile

    async def update_profile(self, profile_id: str, update: ProfileUpdate) -> Profile:
        profile = await self.get(profile_id)
        if not profile:
            raise ProfileNotFoundError(profile_id)

        changes = update.model_dump(exclude_unset=True)
        requested_role = changes.pop("role", None)
        if requested_role is not None and ProfileRole(requested_role).value != profile.role:
            raise ValidationError("Role cannot be changed after sign-up", field="role")

        for field, value in changes.items():
            if field == "full_name" and value is None:
                continue
            setattr(profile, field, value)

        await self.db.commit()
        await self.db.refresh(profile)

        logger.info(f"Updated profile {profile.id}: {', '.join(changes) or 'no changes'}")
        return profile
