from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, String, Text

from ..database import Base


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class UserType(str, Enum):
    CUSTOMER = "customer"
    TRAINER = "trainer"


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column(String(64), nullable=True)
    role = Column(String(16), nullable=False, default=UserRole.USER.value)
    user_type = Column(String(16), nullable=False, default=UserType.CUSTOMER.value, index=True)
    is_approved_trainer = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    last_signed_in = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def can_propose(self) -> bool:
        return self.user_type == UserType.TRAINER.value and bool(self.is_approved_trainer)

    def __repr__(self):
        return "<User(id=%s, role=%s, user_type=%s, approved=%s)>" % (
            self.id,
            self.role,
            self.user_type,
            self.is_approved_trainer,
        )
