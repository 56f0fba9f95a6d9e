from fastapi import APIRouter, Depends

from ..config import get_settings
from ..dependencies import get_current_user
from ..models.users import User
from ..schemas.storage import ProfilePhotoUpload, ProfilePhotoUploadResponse
from ..services.storage_service import ObjectStorage, get_object_storage, upload_profile_photo

router = APIRouter(prefix="/storage", tags=["storage"])


@router.post("/profile-photo", response_model=ProfilePhotoUploadResponse)
def upload_photo(
    payload: ProfilePhotoUpload,
    user: User = Depends(get_current_user),
    storage: ObjectStorage = Depends(get_object_storage),
) -> ProfilePhotoUploadResponse:
    return upload_profile_photo(storage, user, payload, max_bytes=get_settings().max_upload_bytes)
