from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_user
from ..models.users import User
from ..schemas.common import CreatedResponse
from ..schemas.proposals import (
    ProposalCreate,
    ProposalResponse,
    ProposalUpdate,
    ProposalWithTrainerResponse,
)
from ..services import proposal_service

router = APIRouter(prefix="/proposals", tags=["proposals"])


@router.get("/by-consultation/{consultation_id}", response_model=List[ProposalWithTrainerResponse])
def list_by_consultation(consultation_id: str, db: Session = Depends(get_db)) -> List[ProposalWithTrainerResponse]:
    return proposal_service.list_by_consultation(db, consultation_id)


@router.get("/{proposal_id}", response_model=Optional[ProposalResponse])
def get_proposal(proposal_id: str, db: Session = Depends(get_db)) -> Optional[ProposalResponse]:
    return proposal_service.get_proposal(db, proposal_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_proposal(
    payload: ProposalCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CreatedResponse:
    return CreatedResponse(id=proposal_service.create_proposal(db, user, payload))


@router.patch("/{proposal_id}", response_model=ProposalResponse)
def update_proposal(
    proposal_id: str,
    payload: ProposalUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ProposalResponse:
    return proposal_service.update_proposal(db, user, proposal_id, payload)
