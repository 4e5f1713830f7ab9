from typing import Any, Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.orm import Session
from ..database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Plain CRUD over one table.

    Every method takes the session explicitly, each write commits
    before returning, and nothing is cached on the instance.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def get_all(self, db: Session) -> List[ModelType]:
        return db.query(self.model).all()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, *, obj_in: UpdateSchemaType) -> Optional[ModelType]:
        """Full replace of every field; None when the id matches no row."""
        db_obj = self.get(db, obj_in.id)
        if db_obj is None:
            return None

        for field, value in obj_in.model_dump(exclude={"id"}).items():
            setattr(db_obj, field, value)

        db.commit()
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, id: Any) -> bool:
        """True when exactly one row was deleted."""
        deleted = (
            db.query(self.model)
            .filter(self.model.id == id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted == 1
