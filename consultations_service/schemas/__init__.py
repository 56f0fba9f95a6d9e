from .common import CreatedResponse, RequestModel, SuccessResponse
from .consultations import ConsultationCreate, ConsultationResponse, SelectBestAnswerRequest
from .profiles import (
    TrainerProfileResponse,
    TrainerProfileUpsert,
    UserProfileResponse,
    UserProfileUpsert,
)
from .program import Certification, ProgramDay, ProgramExercise
from .proposals import ProposalCreate, ProposalResponse, ProposalUpdate, ProposalWithTrainerResponse
from .storage import ProfilePhotoUpload, ProfilePhotoUploadResponse
from .users import UserResponse, UserTypeUpdate

__all__ = [
    "RequestModel",
    "CreatedResponse",
    "SuccessResponse",
    "ConsultationCreate",
    "ConsultationResponse",
    "SelectBestAnswerRequest",
    "ProgramDay",
    "ProgramExercise",
    "Certification",
    "ProposalCreate",
    "ProposalUpdate",
    "ProposalResponse",
    "ProposalWithTrainerResponse",
    "TrainerProfileUpsert",
    "TrainerProfileResponse",
    "UserProfileUpsert",
    "UserProfileResponse",
    "ProfilePhotoUpload",
    "ProfilePhotoUploadResponse",
    "UserResponse",
    "UserTypeUpdate",
]
