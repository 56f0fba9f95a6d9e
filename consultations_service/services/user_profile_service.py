from __future__ import annotations

import structlog
from sqlalchemy.orm import Session

from ..models.profiles import UserProfile
from ..models.users import User
from ..repositories.base_repository import generate_id
from ..repositories.profiles_repository import user_profile_repository
from ..schemas.profiles import UserProfileResponse, UserProfileUpsert

logger = structlog.get_logger(__name__)


def get_profile(db: Session, user_id: str) -> UserProfileResponse | None:
    entity = user_profile_repository.get_by_user_id(db, user_id)
    if entity is None:
        return None
    return UserProfileResponse.model_validate(entity, from_attributes=True)


def create_or_update_profile(db: Session, caller: User, payload: UserProfileUpsert) -> str:
    changes = payload.model_dump(exclude_none=True)
    if "gender" in changes:
        changes["gender"] = payload.gender.value
    for field in ("bio", "profile_photo"):
        if field in changes:
            changes[field] = changes[field].strip() or None

    existing = user_profile_repository.get_by_user_id(db, caller.id)
    if existing is not None:
        if changes:
            user_profile_repository.update(db, db_obj=existing, obj_in=changes)
            logger.info("user_profile_updated", user_id=caller.id, fields=sorted(changes))
        return existing.id

    profile = UserProfile(id=generate_id(), user_id=caller.id, **changes)
    user_profile_repository.save(db, profile)
    logger.info("user_profile_created", user_id=caller.id, profile_id=profile.id)
    return profile.id
