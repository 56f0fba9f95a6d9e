from __future__ import annotations

import structlog
from sqlalchemy.orm import Session

from ..exceptions import AuthorizationError, ConflictError, ValidationError
from ..metrics import BEST_ANSWERS_SELECTED_TOTAL, CONSULTATIONS_CREATED_TOTAL
from ..models.consultations import Consultation, ConsultationStatus
from ..models.users import User
from ..repositories.base_repository import generate_id
from ..repositories.consultations_repository import consultation_repository, proposal_repository
from ..schemas.consultations import ConsultationCreate, ConsultationResponse
from ..serialization import dump_tags, load_tags

logger = structlog.get_logger(__name__)


def build_consultation_response(entity: Consultation) -> ConsultationResponse:
    return ConsultationResponse(
        id=entity.id,
        user_id=entity.user_id,
        title=entity.title,
        description=entity.description,
        goals=entity.goals,
        current_level=entity.current_level,
        tags=load_tags(entity.tags),
        status=entity.status,
        is_paid=bool(entity.is_paid),
        amount=entity.amount or 0,
        best_answer_id=entity.best_answer_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


def list_consultations(
    db: Session,
    *,
    status: ConsultationStatus | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[ConsultationResponse]:
    rows = consultation_repository.list_by_status(db, status=status, limit=limit, offset=offset)
    return [build_consultation_response(c) for c in rows]


def get_consultation(db: Session, consultation_id: str) -> ConsultationResponse | None:
    entity = consultation_repository.get(db, consultation_id)
    if entity is None:
        return None
    return build_consultation_response(entity)


def create_consultation(db: Session, caller: User, payload: ConsultationCreate) -> str:
    title = payload.title.strip()
    description = payload.description.strip()
    if not title:
        raise ValidationError("title must not be empty")
    if not description:
        raise ValidationError("description must not be empty")

    consultation = Consultation(
        id=generate_id(),
        user_id=caller.id,
        title=title,
        description=description,
        goals=payload.goals,
        current_level=payload.current_level,
        tags=dump_tags(payload.tags),
        status=ConsultationStatus.OPEN.value,
        is_paid=False,
        amount=payload.amount or 0,
        best_answer_id=None,
    )
    consultation_repository.save(db, consultation)
    CONSULTATIONS_CREATED_TOTAL.inc()
    logger.info("consultation_created", consultation_id=consultation.id, user_id=caller.id)
    return consultation.id


def select_best_answer(db: Session, caller: User, consultation_id: str, proposal_id: str) -> None:
    """Mark ``proposal_id`` as the consultation's best answer.

    Only the owner may choose. A missing consultation is reported the same way
    as someone else's consultation. Re-selecting moves the flag: the previous
    best answer is cleared and the new one set, all in a single commit.
    """
    consultation = consultation_repository.get(db, consultation_id)
    if consultation is None or consultation.user_id != caller.id:
        logger.warning(
            "best_answer_unauthorized",
            consultation_id=consultation_id,
            user_id=caller.id,
        )
        raise AuthorizationError("Unauthorized")
    if consultation.status == ConsultationStatus.CLOSED.value:
        raise ConflictError("consultation is closed")

    proposal = proposal_repository.get(db, proposal_id)
    if proposal is None or proposal.consultation_id != consultation.id:
        raise ValidationError("proposal does not belong to this consultation")

    for previous in proposal_repository.list_flagged_best(db, consultation.id):
        if previous.id != proposal.id:
            previous.is_best_answer = False

    consultation.best_answer_id = proposal.id
    consultation.status = ConsultationStatus.ANSWERED.value
    proposal.is_best_answer = True
    consultation_repository.commit(db)

    BEST_ANSWERS_SELECTED_TOTAL.inc()
    logger.info(
        "best_answer_selected",
        consultation_id=consultation.id,
        proposal_id=proposal.id,
        user_id=caller.id,
    )
