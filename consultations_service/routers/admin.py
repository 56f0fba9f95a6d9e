from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_user
from ..models.users import User
from ..schemas.users import UserResponse, UserTypeUpdate
from ..services import admin_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=List[UserResponse])
def get_all_users(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return [UserResponse.model_validate(u) for u in admin_service.get_all_users(db, user)]


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user_by_id(user_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserResponse.model_validate(admin_service.get_user_by_id(db, user, user_id))


@router.get("/trainers/pending", response_model=List[UserResponse])
def get_pending_trainers(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return [UserResponse.model_validate(u) for u in admin_service.get_pending_trainers(db, user)]


@router.post("/users/{user_id}/approve-trainer", response_model=UserResponse)
def approve_trainer(user_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserResponse.model_validate(admin_service.approve_trainer(db, user, user_id))


@router.post("/users/{user_id}/revoke-trainer", response_model=UserResponse)
def revoke_trainer(user_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserResponse.model_validate(admin_service.revoke_trainer(db, user, user_id))


@router.put("/users/{user_id}/user-type", response_model=UserResponse)
def change_user_type(
    user_id: str,
    payload: UserTypeUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return UserResponse.model_validate(admin_service.change_user_type(db, user, user_id, payload.user_type))
