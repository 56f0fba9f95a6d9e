from sqlalchemy.orm import Session

from ..models.users import User, UserType
from .base_repository import BaseRepository

class UserRepository(BaseRepository[User]):
    def list_all(self, db: Session) -> list[User]:
        return db.query(User).order_by(User.created_at.asc()).all()

    def list_pending_trainers(self, db: Session) -> list[User]:
        return (
            db.query(User)
            .filter(User.user_type == UserType.TRAINER.value, User.is_approved_trainer.is_(False))
            .order_by(User.created_at.asc())
            .all()
        )


user_repository = UserRepository(User)
