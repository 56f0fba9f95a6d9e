from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from .common import RequestModel
from .program import ProgramDay


class ProposalCreate(RequestModel):
    consultation_id: str
    title: str = Field(..., max_length=255)
    content: str
    program: list[ProgramDay]
    duration: str | None = Field(None, max_length=100, description="e.g. 4 weeks")
    frequency: str | None = Field(None, max_length=100, description="e.g. 3 times a week")


class ProposalUpdate(RequestModel):
    title: str | None = Field(None, max_length=255)
    content: str | None = None
    program: list[ProgramDay] | None = None
    duration: str | None = Field(None, max_length=100)
    frequency: str | None = Field(None, max_length=100)


class ProposalResponse(BaseModel):
    id: str
    consultation_id: str
    trainer_id: str
    title: str
    content: str
    program: list[ProgramDay] = Field(default_factory=list)
    duration: str | None = None
    frequency: str | None = None
    is_best_answer: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("program")
    def serialize_program(self, program: list[ProgramDay]) -> list[dict]:
        # Optional exercise fields that were never given stay absent, as stored
        return [day.model_dump(exclude_none=True) for day in program]


class ProposalWithTrainerResponse(ProposalResponse):
    trainer_name: str | None = None
    trainer_photo_url: str | None = None
