from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.users import User, UserRole, UserType
from ..repositories.users_repository import user_repository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CallerIdentity:
    """Identity forwarded by the gateway for the current request."""

    user_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None


def get_or_create_user(db: Session, identity: CallerIdentity, *, owner_id: str | None = None) -> User:
    user = user_repository.get(db, identity.user_id)
    is_owner = bool(owner_id) and identity.user_id == owner_id

    if user is None:
        user = User(
            id=identity.user_id,
            name=identity.name,
            email=identity.email,
            login_method=identity.login_method,
            role=UserRole.ADMIN.value if is_owner else UserRole.USER.value,
            user_type=UserType.CUSTOMER.value,
            is_approved_trainer=False,
        )
        try:
            user = user_repository.save(db, user)
        except IntegrityError:
            # A parallel first request inserted the row; commit() already rolled back
            existing = db.get(User, identity.user_id)
            if existing is None:
                raise
            logger.info("user_created_concurrently", user_id=identity.user_id)
            return _refresh_user(db, existing, identity, is_owner=is_owner)
        logger.info("user_created", user_id=user.id, role=user.role)
        return user

    return _refresh_user(db, user, identity, is_owner=is_owner)


def _refresh_user(db: Session, user: User, identity: CallerIdentity, *, is_owner: bool) -> User:
    changes = {
        field: value
        for field, value in (
            ("name", identity.name),
            ("email", identity.email),
            ("login_method", identity.login_method),
        )
        if value is not None and getattr(user, field) != value
    }
    if is_owner and user.role != UserRole.ADMIN.value:
        changes["role"] = UserRole.ADMIN.value
    if changes:
        user = user_repository.update(db, db_obj=user, obj_in=changes)
        logger.info("user_identity_refreshed", user_id=user.id, fields=sorted(changes))
    return user


def record_sign_in(db: Session, user: User) -> User:
    return user_repository.update(db, db_obj=user, obj_in={"last_signed_in": datetime.utcnow()})
