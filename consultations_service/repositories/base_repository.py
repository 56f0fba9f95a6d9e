import uuid
from typing import Any, Generic, Optional, Type, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import Base

logger = structlog.get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.get(self.model, id)

    def save(self, db: Session, db_obj: ModelType, *, commit: bool = True) -> ModelType:
        """Add ``db_obj`` to the session; flush only when the caller owns the commit."""
        db.add(db_obj)
        if not commit:
            db.flush()
            return db_obj
        self.commit(db)
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: dict[str, Any],
        commit: bool = True,
    ) -> ModelType:
        protected_fields = {"id"}
        for field, value in obj_in.items():
            if field not in protected_fields and hasattr(db_obj, field):
                setattr(db_obj, field, value)
        return self.save(db, db_obj, commit=commit)

    def commit(self, db: Session) -> None:
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("db_commit_failed", model=self.model.__name__, error=str(e))
            raise


def generate_id() -> str:
    return uuid.uuid4().hex
