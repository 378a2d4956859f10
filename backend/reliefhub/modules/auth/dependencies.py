from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from reliefhub.core.database import get_db
from reliefhub.core.exceptions import ActorRoleError, AuthenticationError
from reliefhub.core.logging_config import logger, set_actor_id
from reliefhub.core.security import decode_token, extract_profile_claims
from reliefhub.models.profile import Profile, ProfileRole
from reliefhub.schemas.profile import Actor
from reliefhub.services.profile_service import ProfileService

# auto_error off so a missing header is a 401 from our own error handler
security = HTTPBearer(auto_error=False)


async def get_current_profile(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Profile:
    """Resolve the bearer token to a profile, provisioning it on first sight"""
    if not credentials:
        logger.log_auth_event("token", success=False, reason="missing bearer token")
        raise AuthenticationError("Not authenticated")

    try:
        payload = decode_token(credentials.credentials)
    except AuthenticationError as e:
        logger.log_auth_event("token", success=False, reason=e.message)
        raise

    subject = payload.get("sub")
    if not subject:
        logger.log_auth_event("token", success=False, reason="no subject")
        raise AuthenticationError("Invalid token payload")

    profile = await ProfileService(db).get_or_provision(subject, extract_profile_claims(payload))

    request.state.actor_id = profile.id
    set_actor_id(profile.id)
    logger.log_auth_event("token", success=True, actor_id=profile.id)
    return profile


async def get_current_actor(
    profile: Profile = Depends(get_current_profile)
) -> Actor:
    """Actor context (id + stored role) for the services"""
    return Actor(id=profile.id, role=ProfileRole(profile.role))


async def require_camp_admin(
    actor: Actor = Depends(get_current_actor)
) -> Actor:
    """Current actor, who must hold the camp role"""
    if not actor.is_camp_admin:
        raise ActorRoleError(ProfileRole.CAMP.value, actor.role.value)
    return actor


async def require_ngo(
    actor: Actor = Depends(get_current_actor)
) -> Actor:
    """Current actor, who must hold the ngo role"""
    if not actor.is_ngo:
        raise ActorRoleError(ProfileRole.NGO.value, actor.role.value)
    return actor
