from __future__ import annotations

from pydantic import BaseModel, Field

from ..models.users import UserType
from .common import RequestModel


class ProfilePhotoUpload(RequestModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    file_data: str = Field(..., min_length=1, description="Base64 encoded file content")
    mime_type: str = Field(..., min_length=1, max_length=64)
    user_type: UserType = UserType.CUSTOMER


class ProfilePhotoUploadResponse(BaseModel):
    key: str
    url: str
