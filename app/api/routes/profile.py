"""
Extended user profile endpoints.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_current_user
from app.db.models.user import User
from app.db.models.user_profile import UserProfile, PROFILE_FIELDS
from app.schemas.profile import UserProfileUpdate, UserProfileResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=UserProfileResponse)
def get_profile(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return the saved profile, or an empty one if the user never saved it."""
    profile = db.query(UserProfile).filter(UserProfile.user_id == user.id).first()
    if not profile:
        return UserProfileResponse(user_id=user.id)
    return UserProfileResponse.model_validate(profile)


@router.put("", response_model=UserProfileResponse)
def update_profile(
    payload: UserProfileUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Replace the profile.

    Every field is overwritten; anything missing from the body is cleared.
    """
    try:
        profile = db.query(UserProfile).filter(UserProfile.user_id == user.id).first()
        if not profile:
            profile = UserProfile(user_id=user.id)
            db.add(profile)

        data = payload.model_dump()
        for field in PROFILE_FIELDS:
            setattr(profile, field, data.get(field))

        db.commit()
        db.refresh(profile)
        logger.info(f"Profile saved: user_id={user.id}")
        return UserProfileResponse.model_validate(profile)
    except Exception:
        db.rollback()
        logger.error("Failed to save profile", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save profile"
        )
