from typing import Optional

from fastapi import Depends, Request
from sentry_sdk import set_tag, set_user
from sqlalchemy.orm import Session

from .config import get_settings
from .database import get_db
from .exceptions import AuthenticationRequired
from .logging_config import SERVICE_NAME
from .models.users import User
from .services.auth_service import CallerIdentity, get_or_create_user


def get_caller_identity(request: Request) -> Optional[CallerIdentity]:
    """Identity headers forwarded by the gateway (case-insensitive)."""
    user_id = (request.headers.get("x-user-id") or "").strip()
    if not user_id:
        return None
    set_user({"id": user_id})
    set_tag("service", SERVICE_NAME)
    return CallerIdentity(
        user_id=user_id,
        name=request.headers.get("x-user-name") or None,
        email=request.headers.get("x-user-email") or None,
        login_method=request.headers.get("x-login-method") or None,
    )


def get_optional_user(
    identity: Optional[CallerIdentity] = Depends(get_caller_identity),
    db: Session = Depends(get_db),
) -> Optional[User]:
    if identity is None:
        return None
    return get_or_create_user(db, identity, owner_id=get_settings().owner_id)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise AuthenticationRequired("X-User-Id header required")
    return user
