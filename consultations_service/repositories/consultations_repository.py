from typing import Optional

from sqlalchemy.orm import Session

from ..models.consultations import Consultation, ConsultationStatus, Proposal
from ..models.profiles import TrainerProfile
from ..models.users import User
from .base_repository import BaseRepository


class ConsultationRepository(BaseRepository[Consultation]):
    def list_by_status(
        self,
        db: Session,
        *,
        status: Optional[ConsultationStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Consultation]:
        q = db.query(Consultation)
        if status is not None:
            q = q.filter(Consultation.status == status.value)
        q = q.order_by(Consultation.created_at.asc())
        if offset:
            q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()


class ProposalRepository(BaseRepository[Proposal]):
    def get_by_trainer_and_consultation(
        self, db: Session, *, trainer_id: str, consultation_id: str
    ) -> Optional[Proposal]:
        return (
            db.query(Proposal)
            .filter(Proposal.trainer_id == trainer_id, Proposal.consultation_id == consultation_id)
            .first()
        )

    def list_flagged_best(self, db: Session, consultation_id: str) -> list[Proposal]:
        return (
            db.query(Proposal)
            .filter(Proposal.consultation_id == consultation_id, Proposal.is_best_answer.is_(True))
            .all()
        )

    def list_with_trainer(
        self, db: Session, consultation_id: str
    ) -> list[tuple[Proposal, Optional[str], Optional[str]]]:
        """Proposals of a consultation with the trainer's display name and photo."""
        q = (
            db.query(Proposal, User.name, TrainerProfile.profile_photo)
            .outerjoin(User, User.id == Proposal.trainer_id)
            .outerjoin(TrainerProfile, TrainerProfile.user_id == Proposal.trainer_id)
            .filter(Proposal.consultation_id == consultation_id)
            .order_by(Proposal.created_at.asc())
        )
        return [(proposal, name, photo) for proposal, name, photo in q.all()]


consultation_repository = ConsultationRepository(Consultation)
proposal_repository = ProposalRepository(Proposal)
