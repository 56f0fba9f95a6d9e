from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from ..database import Base


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(String(64), primary_key=True)
    # Not a foreign key: profiles are looked up by user id
    user_id = Column(String(64), nullable=False, index=True)
    profile_photo = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    height = Column(Integer, nullable=True)
    weight = Column(Integer, nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(16), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)


class TrainerProfile(Base):
    __tablename__ = "trainer_profiles"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    profile_photo = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    # JSON text, see serialization.py
    specialties = Column(Text, nullable=True)
    certifications = Column(Text, nullable=True)
    social_links = Column(Text, nullable=True)
    is_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
