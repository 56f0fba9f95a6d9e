from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_optional_user
from ..models.users import User
from ..schemas.common import SuccessResponse
from ..schemas.users import UserResponse
from ..services.auth_service import record_sign_in

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=Optional[UserResponse])
def me(user: Optional[User] = Depends(get_optional_user), db: Session = Depends(get_db)):
    if user is None:
        return None
    return UserResponse.model_validate(record_sign_in(db, user))


@router.post("/logout", response_model=SuccessResponse)
def logout() -> SuccessResponse:
    # The session cookie is owned by the gateway; nothing to clear here
    return SuccessResponse()
