from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..dependencies import get_current_user
from ..models.consultations import ConsultationStatus
from ..models.users import User
from ..schemas.common import CreatedResponse, SuccessResponse
from ..schemas.consultations import ConsultationCreate, ConsultationResponse, SelectBestAnswerRequest
from ..services import consultation_service

router = APIRouter(prefix="/consultations", tags=["consultations"])


@router.get("", response_model=List[ConsultationResponse])
def list_consultations(
    status: Optional[ConsultationStatus] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
) -> List[ConsultationResponse]:
    return consultation_service.list_consultations(db, status=status, limit=limit, offset=offset)


@router.get("/{consultation_id}", response_model=Optional[ConsultationResponse])
def get_consultation(consultation_id: str, db: Session = Depends(get_db)) -> Optional[ConsultationResponse]:
    return consultation_service.get_consultation(db, consultation_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_consultation(
    payload: ConsultationCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CreatedResponse:
    return CreatedResponse(id=consultation_service.create_consultation(db, user, payload))


@router.post("/{consultation_id}/best-answer", response_model=SuccessResponse)
def select_best_answer(
    consultation_id: str,
    payload: SelectBestAnswerRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    consultation_service.select_best_answer(db, user, consultation_id, payload.proposal_id)
    return SuccessResponse()
