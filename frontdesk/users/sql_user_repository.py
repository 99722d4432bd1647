from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from ..database.sql_base import SqlAlchemyRepository
from ..extensions import db
from .model import User
from .repository import UserRepository


class SqlUserRepository(SqlAlchemyRepository[User], UserRepository):
    model = User

    def _ordering(self):
        return (User.username,)

    def get_by_username(self, username: str) -> Optional[User]:
        return db.session.scalars(select(User).where(User.username == username).limit(1)).first()
