from typing import Optional, TypeVar

from sqlalchemy.orm import Session

from ..models.profiles import TrainerProfile, UserProfile
from .base_repository import BaseRepository

ProfileType = TypeVar("ProfileType", UserProfile, TrainerProfile)


class ProfileRepository(BaseRepository[ProfileType]):
    def get_by_user_id(self, db: Session, user_id: str) -> Optional[ProfileType]:
        return db.query(self.model).filter(self.model.user_id == user_id).first()


user_profile_repository = ProfileRepository(UserProfile)
trainer_profile_repository = ProfileRepository(TrainerProfile)
