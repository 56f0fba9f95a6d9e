from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_user
from ..models.users import User
from ..schemas.common import CreatedResponse
from ..schemas.profiles import UserProfileResponse, UserProfileUpsert
from ..services import user_profile_service

router = APIRouter(prefix="/user-profiles", tags=["user-profiles"])


@router.put("/me", response_model=CreatedResponse)
def create_or_update_profile(
    payload: UserProfileUpsert,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CreatedResponse:
    return CreatedResponse(id=user_profile_service.create_or_update_profile(db, user, payload))


@router.get("/{user_id}", response_model=Optional[UserProfileResponse])
def get_profile(user_id: str, db: Session = Depends(get_db)) -> Optional[UserProfileResponse]:
    return user_profile_service.get_profile(db, user_id)
