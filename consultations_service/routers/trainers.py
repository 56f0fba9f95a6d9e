from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_user
from ..models.users import User
from ..schemas.common import CreatedResponse
from ..schemas.profiles import TrainerProfileResponse, TrainerProfileUpsert
from ..schemas.users import UserResponse, UserTypeUpdate
from ..services import trainer_service

router = APIRouter(prefix="/trainers", tags=["trainers"])


@router.put("/me/profile", response_model=CreatedResponse)
def create_or_update_profile(
    payload: TrainerProfileUpsert,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CreatedResponse:
    return CreatedResponse(id=trainer_service.create_or_update_profile(db, user, payload))


@router.put("/me/user-type", response_model=UserResponse)
def update_user_type(
    payload: UserTypeUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return UserResponse.model_validate(trainer_service.update_user_type(db, user, payload.user_type))


@router.get("/{user_id}/profile", response_model=Optional[TrainerProfileResponse])
def get_profile(user_id: str, db: Session = Depends(get_db)) -> Optional[TrainerProfileResponse]:
    return trainer_service.get_profile(db, user_id)
