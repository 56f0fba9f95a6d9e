from __future__ import annotations

import structlog
from sqlalchemy.orm import Session

from ..models.profiles import TrainerProfile
from ..models.users import User, UserType
from ..repositories.base_repository import generate_id
from ..repositories.profiles_repository import trainer_profile_repository
from ..repositories.users_repository import user_repository
from ..schemas.profiles import TrainerProfileResponse, TrainerProfileUpsert
from ..serialization import (
    dump_certifications,
    dump_social_links,
    dump_specialties,
    load_certifications,
    load_social_links,
    load_specialties,
)

logger = structlog.get_logger(__name__)


def build_trainer_profile_response(entity: TrainerProfile) -> TrainerProfileResponse:
    return TrainerProfileResponse(
        id=entity.id,
        user_id=entity.user_id,
        profile_photo=entity.profile_photo,
        bio=entity.bio,
        specialties=load_specialties(entity.specialties),
        certifications=load_certifications(entity.certifications),
        social_links=load_social_links(entity.social_links),
        is_verified=bool(entity.is_verified),
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


def get_profile(db: Session, user_id: str) -> TrainerProfileResponse | None:
    entity = trainer_profile_repository.get_by_user_id(db, user_id)
    if entity is None:
        return None
    return build_trainer_profile_response(entity)


def _profile_changes(payload: TrainerProfileUpsert) -> dict:
    changes: dict = {}
    if payload.bio is not None:
        changes["bio"] = payload.bio.strip() or None
    if payload.profile_photo is not None:
        changes["profile_photo"] = payload.profile_photo.strip() or None
    if payload.specialties is not None:
        changes["specialties"] = dump_specialties([s.strip() for s in payload.specialties if s and s.strip()])
    if payload.certifications is not None:
        changes["certifications"] = dump_certifications(payload.certifications)
    if payload.social_links is not None:
        changes["social_links"] = dump_social_links(payload.social_links)
    return changes


def create_or_update_profile(db: Session, caller: User, payload: TrainerProfileUpsert) -> str:
    changes = _profile_changes(payload)
    existing = trainer_profile_repository.get_by_user_id(db, caller.id)
    if existing is not None:
        if changes:
            trainer_profile_repository.update(db, db_obj=existing, obj_in=changes)
            logger.info("trainer_profile_updated", user_id=caller.id, fields=sorted(changes))
        return existing.id

    profile = TrainerProfile(id=generate_id(), user_id=caller.id, is_verified=False, **changes)
    trainer_profile_repository.save(db, profile)
    logger.info("trainer_profile_created", user_id=caller.id, profile_id=profile.id)
    return profile.id


def update_user_type(db: Session, caller: User, user_type: UserType) -> User:
    """Self-service customer/trainer toggle. Approval stays an admin decision."""
    if caller.user_type == user_type.value:
        return caller
    user = user_repository.update(db, db_obj=caller, obj_in={"user_type": user_type.value})
    logger.info("user_type_changed", user_id=user.id, user_type=user.user_type, by="self")
    return user
