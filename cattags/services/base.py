"""Base service that incorporates business logic and CRUD operations."""

from typing import Generic, Type, TypeVar
from uuid import UUID

from fastapi import Depends
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from cattags.errors.common import NotFoundError
from cattags.models.base import BaseModel
from cattags.schemas.base import BaseUpdateSchema
from cattags.uow import get_uow

M = TypeVar("M", bound=BaseModel)  # model
BUS = TypeVar("BUS", bound=BaseUpdateSchema)


class BaseService(Generic[M]):
    model: Type[M]
    db: Session

    def __init__(self, db: Session = Depends(get_uow)):
        self.db = db

    def create(self, schema: BUS) -> M:
        new_obj = self.model(**schema.dump())
        self.db.add(new_obj)
        self.db.flush()
        self.db.refresh(new_obj)
        return new_obj

    def get(self, obj_id: UUID) -> M:
        db_obj = self.db.query(self.model).filter(self.model.id == obj_id).first()
        if not db_obj:
            raise NotFoundError(f"{self.model.__name__} id={obj_id}")
        return db_obj

    def update(self, obj_id: UUID, schema: BUS) -> M:
        obj = self.get(obj_id)
        for key, value in schema.dump().items():
            setattr(obj, key, value)
        # same database clock as created_at
        obj.modified_at = func.now()
        self.db.flush()
        self.db.refresh(obj)
        return obj

    def delete(self, obj_id: UUID) -> UUID:
        obj = self.get(obj_id)
        self.db.delete(obj)
        self.db.flush()
        return obj_id
