from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..models.consultations import ConsultationStatus
from .common import RequestModel


class ConsultationCreate(RequestModel):
    title: str = Field(..., max_length=255)
    description: str
    goals: str | None = None
    current_level: str | None = Field(None, max_length=100)
    tags: list[str] | None = None
    amount: int | None = Field(None, ge=0, description="Display-only price, no payment is taken")


class SelectBestAnswerRequest(RequestModel):
    proposal_id: str


class ConsultationResponse(BaseModel):
    id: str
    user_id: str
    title: str
    description: str
    goals: str | None = None
    current_level: str | None = None
    tags: list[str] = Field(default_factory=list)
    status: ConsultationStatus
    is_paid: bool
    amount: int
    best_answer_id: str | None = None
    created_at: datetime
    updated_at: datetime
