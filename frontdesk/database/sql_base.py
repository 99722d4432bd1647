from __future__ import annotations

import uuid
from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db

ModelT = TypeVar("ModelT")


def new_id() -> str:
    return str(uuid.uuid4())


def commit() -> None:
    """Commit the request session; a failed commit is rolled back before re-raising."""

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


class SqlAlchemyRepository(Generic[ModelT]):
    """Shared CRUD plumbing for Flask-SQLAlchemy repositories.

    Note: Every write commits immediately; the request-scoped session is
    removed by Flask-SQLAlchemy at app-context teardown.
    """

    model: type

    def _ordering(self) -> Sequence[Any]:
        return ()

    def get_by_id(self, entity_id: str) -> Optional[ModelT]:
        return db.session.get(self.model, entity_id)

    def list_all(self) -> Sequence[ModelT]:
        stmt = select(self.model).order_by(*self._ordering())
        return list(db.session.scalars(stmt))

    def create(self, **fields: Any) -> ModelT:
        entity = self.model(**fields)
        db.session.add(entity)
        commit()
        return entity

    def update(self, entity_id: str, **fields: Any) -> Optional[ModelT]:
        entity = self.get_by_id(entity_id)
        if entity is None:
            return None
        for name, value in fields.items():
            setattr(entity, name, value)
        commit()
        return entity

    def delete_by_id(self, entity_id: str) -> bool:
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        db.session.delete(entity)
        commit()
        return True
