from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from reliefhub.core.database import get_db
from reliefhub.models.profile import Profile
from reliefhub.modules.auth.dependencies import get_current_profile
from reliefhub.schemas.profile import ProfileResponse, ProfileUpdate
from reliefhub.services.profile_service import ProfileService

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(profile: Profile = Depends(get_current_profile)):
    """Caller's profile (created on first authenticated request)"""
    return profile


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    update: ProfileUpdate,
    profile: Profile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db)
):
    """Edit name/phone; the role cannot be changed"""
    return await ProfileService(db).update_profile(profile.id, update)
