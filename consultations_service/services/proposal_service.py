from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import AuthorizationError, ConflictError, ValidationError
from ..metrics import PROPOSALS_CREATED_TOTAL, PROPOSALS_REJECTED_TOTAL
from ..models.consultations import Proposal
from ..models.users import User
from ..repositories.base_repository import generate_id
from ..repositories.consultations_repository import consultation_repository, proposal_repository
from ..schemas.program import ProgramDay
from ..schemas.proposals import (
    ProposalCreate,
    ProposalResponse,
    ProposalUpdate,
    ProposalWithTrainerResponse,
)
from ..serialization import dump_program, load_program

logger = structlog.get_logger(__name__)

DUPLICATE_PROPOSAL_DETAIL = "already proposed, edit instead"


def validate_program(program: list[ProgramDay]) -> list[ProgramDay]:
    if not program:
        raise ValidationError("program must contain at least one day")
    has_exercise = False
    for index, day in enumerate(program, start=1):
        if isinstance(day.day, str) and not day.day.strip():
            raise ValidationError(f"program day {index} needs a label")
        for exercise in day.exercises:
            if not exercise.name.strip():
                raise ValidationError(f"program day {index}: every exercise needs a name")
            has_exercise = True
    if not has_exercise:
        raise ValidationError("program must contain at least one exercise")
    return program


def _require_text(value: str, field: str) -> str:
    if not value.strip():
        raise ValidationError(f"{field} must not be empty")
    return value.strip()


def _build_proposal_kwargs(entity: Proposal) -> dict:
    return {
        "id": entity.id,
        "consultation_id": entity.consultation_id,
        "trainer_id": entity.trainer_id,
        "title": entity.title,
        "content": entity.content,
        "program": load_program(entity.program),
        "duration": entity.duration,
        "frequency": entity.frequency,
        "is_best_answer": bool(entity.is_best_answer),
        "created_at": entity.created_at,
        "updated_at": entity.updated_at,
    }


def build_proposal_response(entity: Proposal) -> ProposalResponse:
    return ProposalResponse(**_build_proposal_kwargs(entity))


def get_proposal(db: Session, proposal_id: str) -> ProposalResponse | None:
    entity = proposal_repository.get(db, proposal_id)
    if entity is None:
        return None
    return build_proposal_response(entity)


def list_by_consultation(db: Session, consultation_id: str) -> list[ProposalWithTrainerResponse]:
    return [
        ProposalWithTrainerResponse(
            **_build_proposal_kwargs(proposal),
            trainer_name=trainer_name,
            trainer_photo_url=trainer_photo,
        )
        for proposal, trainer_name, trainer_photo in proposal_repository.list_with_trainer(db, consultation_id)
    ]


def create_proposal(db: Session, caller: User, payload: ProposalCreate) -> str:
    if not caller.can_propose:
        PROPOSALS_REJECTED_TOTAL.labels(reason="unapproved").inc()
        logger.warning("proposal_rejected_unapproved", user_id=caller.id, user_type=caller.user_type)
        raise AuthorizationError("not an approved trainer")

    title = _require_text(payload.title, "title")
    content = _require_text(payload.content, "content")

    consultation = consultation_repository.get(db, payload.consultation_id)
    if consultation is None:
        raise ValidationError("consultation does not exist")

    existing = proposal_repository.get_by_trainer_and_consultation(
        db, trainer_id=caller.id, consultation_id=consultation.id
    )
    if existing is not None:
        PROPOSALS_REJECTED_TOTAL.labels(reason="duplicate").inc()
        logger.info("proposal_conflict", proposal_id=existing.id, trainer_id=caller.id)
        raise ConflictError(DUPLICATE_PROPOSAL_DETAIL)

    try:
        validate_program(payload.program)
    except ValidationError:
        PROPOSALS_REJECTED_TOTAL.labels(reason="invalid_program").inc()
        raise

    proposal = Proposal(
        id=generate_id(),
        consultation_id=consultation.id,
        trainer_id=caller.id,
        title=title,
        content=content,
        program=dump_program(payload.program),
        duration=payload.duration,
        frequency=payload.frequency,
        is_best_answer=False,
    )
    try:
        proposal_repository.save(db, proposal)
    except IntegrityError as exc:
        # A concurrent submission won the unique (trainer_id, consultation_id) index
        PROPOSALS_REJECTED_TOTAL.labels(reason="duplicate").inc()
        raise ConflictError(DUPLICATE_PROPOSAL_DETAIL) from exc

    PROPOSALS_CREATED_TOTAL.inc()
    logger.info(
        "proposal_created",
        proposal_id=proposal.id,
        consultation_id=consultation.id,
        trainer_id=caller.id,
    )
    return proposal.id


def update_proposal(db: Session, caller: User, proposal_id: str, payload: ProposalUpdate) -> ProposalResponse:
    proposal = proposal_repository.get(db, proposal_id)
    if proposal is None or proposal.trainer_id != caller.id:
        raise AuthorizationError("Unauthorized")

    changes: dict = {}
    if payload.title is not None:
        changes["title"] = _require_text(payload.title, "title")
    if payload.content is not None:
        changes["content"] = _require_text(payload.content, "content")
    if payload.program is not None:
        changes["program"] = dump_program(validate_program(payload.program))
    if payload.duration is not None:
        changes["duration"] = payload.duration
    if payload.frequency is not None:
        changes["frequency"] = payload.frequency

    if changes:
        proposal = proposal_repository.update(db, db_obj=proposal, obj_in=changes)
        logger.info("proposal_updated", proposal_id=proposal.id, fields=sorted(changes))
    return build_proposal_response(proposal)
