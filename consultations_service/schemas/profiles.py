from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..models.profiles import Gender
from .common import RequestModel
from .program import Certification


class TrainerProfileUpsert(RequestModel):
    bio: str | None = None
    specialties: list[str] | None = None
    certifications: list[Certification] | None = None
    social_links: dict[str, str] | None = Field(None, description="Platform name -> profile URL")
    profile_photo: str | None = None


class TrainerProfileResponse(BaseModel):
    id: str
    user_id: str
    profile_photo: str | None = None
    bio: str | None = None
    specialties: list[str] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    social_links: dict[str, str] = Field(default_factory=dict)
    is_verified: bool
    created_at: datetime
    updated_at: datetime


class UserProfileUpsert(RequestModel):
    profile_photo: str | None = None
    bio: str | None = None
    height: int | None = Field(None, gt=0, le=300, description="cm")
    weight: int | None = Field(None, gt=0, le=500, description="kg")
    age: int | None = Field(None, gt=0, le=150)
    gender: Gender | None = None


class UserProfileResponse(BaseModel):
    id: str
    user_id: str
    profile_photo: str | None = None
    bio: str | None = None
    height: int | None = None
    weight: int | None = None
    age: int | None = None
    gender: Gender | None = None
    created_at: datetime
    updated_at: datetime
