from typing import Any, Generic, Type, TypeVar, Optional, Protocol
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

PAGE_SIZE = 10

# Integer primary keys are int4; OFFSET is bounded by a signed 64-bit integer
MAX_ID = 2**31 - 1
MAX_OFFSET = 2**63 - 1

class SQLAlchemyModel(Protocol):
    id: Any

ModelType = TypeVar("ModelType", bound=SQLAlchemyModel)

class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        """
        Base class for data access repositories.
        Provides default CRUD operations. Every write commits immediately.
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        if isinstance(id, int) and not -MAX_ID - 1 <= id <= MAX_ID:
            return None
        return db.query(self.model).filter(self.model.id == id).first()

    def get_multi(
        self, db: Session, *, page: int | None = 1, filters: list | None = None
    ) -> list[ModelType]:
        """
        Returns one 1-indexed page of PAGE_SIZE rows ordered by id.
        page=None returns every row. Pages past the end are empty.
        """
        query = db.query(self.model)
        for criterion in filters or []:
            query = query.filter(criterion)
        query = query.order_by(self.model.id)
        if page is not None:
            offset = (page - 1) * PAGE_SIZE
            if offset > MAX_OFFSET:
                return []
            query = query.offset(offset).limit(PAGE_SIZE)
        return query.all()

    def create(self, db: Session, *, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, *, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, db_obj: ModelType) -> None:
        db.delete(db_obj)
        db.commit()
