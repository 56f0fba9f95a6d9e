from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text, UniqueConstraint

from ..database import Base


class ConsultationStatus(str, Enum):
    OPEN = "open"
    ANSWERED = "answered"
    CLOSED = "closed"


class Consultation(Base):
    __tablename__ = "consultations"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    goals = Column(Text, nullable=True)
    current_level = Column(String(100), nullable=True)
    tags = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=ConsultationStatus.OPEN.value)
    is_paid = Column(Boolean, nullable=False, default=False)
    amount = Column(Integer, nullable=False, default=0)
    best_answer_id = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (Index("ix_consultations_status_created", "status", "created_at"),)

    def __repr__(self):
        return "<Consultation(id=%s, status=%s, best_answer_id=%s)>" % (self.id, self.status, self.best_answer_id)


class Proposal(Base):
    __tablename__ = "proposals"

    id = Column(String(64), primary_key=True)
    consultation_id = Column(String(64), nullable=False, index=True)
    trainer_id = Column(String(64), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    program = Column(Text, nullable=True)
    duration = Column(String(100), nullable=True)
    frequency = Column(String(100), nullable=True)
    is_best_answer = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("trainer_id", "consultation_id", name="uq_proposals_trainer_consultation"),
        Index("ix_proposals_consultation_created", "consultation_id", "created_at"),
    )

    def __repr__(self):
        return "<Proposal(id=%s, consultation_id=%s, trainer_id=%s)>" % (
            self.id,
            self.consultation_id,
            self.trainer_id,
        )
