from __future__ import annotations

import structlog
from sqlalchemy.orm import Session

from ..exceptions import AuthorizationError, UserNotFoundError
from ..metrics import TRAINER_APPROVAL_CHANGES_TOTAL
from ..models.users import User, UserType
from ..repositories.users_repository import user_repository

logger = structlog.get_logger(__name__)


def _require_admin(caller: User) -> None:
    if not caller.is_admin:
        logger.warning("admin_access_denied", user_id=caller.id, role=caller.role)
        raise AuthorizationError("Admin access required")


def _get_target(db: Session, user_id: str) -> User:
    user = user_repository.get(db, user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def get_all_users(db: Session, caller: User) -> list[User]:
    _require_admin(caller)
    return user_repository.list_all(db)


def get_user_by_id(db: Session, caller: User, user_id: str) -> User:
    _require_admin(caller)
    return _get_target(db, user_id)


def get_pending_trainers(db: Session, caller: User) -> list[User]:
    _require_admin(caller)
    return user_repository.list_pending_trainers(db)


def approve_trainer(db: Session, caller: User, user_id: str) -> User:
    _require_admin(caller)
    user = user_repository.update(db, db_obj=_get_target(db, user_id), obj_in={"is_approved_trainer": True})
    TRAINER_APPROVAL_CHANGES_TOTAL.labels(action="approve").inc()
    logger.info("trainer_approved", user_id=user.id, admin_id=caller.id)
    return user


def revoke_trainer(db: Session, caller: User, user_id: str) -> User:
    """Withdraw approval. Proposals already submitted and best-answer flags stay as they are."""
    _require_admin(caller)
    user = user_repository.update(db, db_obj=_get_target(db, user_id), obj_in={"is_approved_trainer": False})
    TRAINER_APPROVAL_CHANGES_TOTAL.labels(action="revoke").inc()
    logger.info("trainer_revoked", user_id=user.id, admin_id=caller.id)
    return user


def change_user_type(db: Session, caller: User, user_id: str, user_type: UserType) -> User:
    _require_admin(caller)
    user = user_repository.update(db, db_obj=_get_target(db, user_id), obj_in={"user_type": user_type.value})
    logger.info("user_type_changed", user_id=user.id, user_type=user.user_type, by=caller.id)
    return user
