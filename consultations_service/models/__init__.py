from .consultations import Consultation, ConsultationStatus, Proposal
from .profiles import Gender, TrainerProfile, UserProfile
from .users import User, UserRole, UserType

__all__ = [
    "User",
    "UserRole",
    "UserType",
    "UserProfile",
    "TrainerProfile",
    "Gender",
    "Consultation",
    "ConsultationStatus",
    "Proposal",
]
