from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ..models.users import UserRole, UserType
from .common import RequestModel


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None
    role: UserRole
    user_type: UserType
    is_approved_trainer: bool
    created_at: datetime
    last_signed_in: datetime


class UserTypeUpdate(RequestModel):
    user_type: UserType
