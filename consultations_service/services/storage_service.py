"""Profile photo uploads to the external object storage."""

from __future__ import annotations

import base64
import binascii
import mimetypes
import time
from pathlib import PurePosixPath

import httpx
import structlog
from fastapi import HTTPException, status

from ..config import get_settings
from ..exceptions import ValidationError
from ..metrics import PROFILE_PHOTOS_UPLOADED_TOTAL
from ..models.users import User
from ..schemas.storage import ProfilePhotoUpload, ProfilePhotoUploadResponse

logger = structlog.get_logger(__name__)


class ObjectStorage:
    """Minimal HTTP object store client: PUT bytes under a key, get a public URL back."""

    def __init__(
        self,
        base_url: str,
        *,
        public_base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = 20.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.public_base_url = (public_base_url or base_url).rstrip("/")
        self.api_key = api_key
        self.timeout = httpx.Timeout(timeout)
        self.transport = transport

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"

    def put(self, key: str, data: bytes, content_type: str) -> str:
        headers = {"Content-Type": content_type}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        url = f"{self.base_url}/{key}"
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.put(url, content=data, headers=headers)
        except httpx.RequestError as exc:
            logger.warning("storage_put_failed", key=key, error=str(exc))
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to store file") from exc
        if resp.status_code >= 400:
            logger.warning(
                "storage_put_bad_status",
                key=key,
                status_code=resp.status_code,
                body=resp.text[:200],
            )
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to store file")
        return self.public_url(key)


def get_object_storage() -> ObjectStorage:
    settings = get_settings()
    return ObjectStorage(
        settings.storage_base_url,
        public_base_url=settings.public_storage_url,
        api_key=settings.storage_api_key,
        timeout=settings.storage_timeout_seconds,
    )


def decode_file_data(file_data: str) -> bytes:
    # Browsers hand over data URLs ("data:image/png;base64,....")
    if file_data.startswith("data:") and "," in file_data:
        file_data = file_data.split(",", 1)[1]
    try:
        return base64.b64decode(file_data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError("file_data is not valid base64") from exc


def build_storage_key(user_type: str, user_id: str, file_name: str, mime_type: str, now_ms: int) -> str:
    ext = PurePosixPath(file_name).suffix.lower()
    if not ext:
        ext = mimetypes.guess_extension(mime_type) or ""
    return f"{user_type}-profiles/{user_id}/{now_ms}{ext}"


def upload_profile_photo(
    storage: ObjectStorage,
    caller: User,
    payload: ProfilePhotoUpload,
    *,
    max_bytes: int,
) -> ProfilePhotoUploadResponse:
    mime_type = payload.mime_type.strip().lower()
    if not mime_type.startswith("image/"):
        raise ValidationError("only image uploads are accepted")

    data = decode_file_data(payload.file_data)
    if not data:
        raise ValidationError("file is empty")
    if len(data) > max_bytes:
        raise ValidationError(f"file exceeds the {max_bytes} byte limit")

    key = build_storage_key(
        payload.user_type.value,
        caller.id,
        payload.file_name,
        mime_type,
        int(time.time() * 1000),
    )
    url = storage.put(key, data, mime_type)
    PROFILE_PHOTOS_UPLOADED_TOTAL.inc()
    logger.info("profile_photo_uploaded", user_id=caller.id, key=key, size=len(data))
    return ProfilePhotoUploadResponse(key=key, url=url)
