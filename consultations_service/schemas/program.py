from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProgramExercise(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    sets: str | None = None
    reps: str | None = None
    duration: str | None = None
    notes: str | None = None


class ProgramDay(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Free-form label ("Day 1", "Mon") or a day number
    day: int | str
    exercises: list[ProgramExercise] = Field(default_factory=list)


class Certification(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    issuer: str
    year: str
