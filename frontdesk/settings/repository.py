from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ..database.sql_base import SqlAlchemyRepository, commit
from ..extensions import db
from .model import Setting


class SettingRepository(SqlAlchemyRepository[Setting]):
    model = Setting

    def _ordering(self):
        return (Setting.key,)

    def get_by_key(self, key: str) -> Optional[Setting]:
        return db.session.scalars(select(Setting).where(Setting.key == key).limit(1)).first()

    def upsert(self, key: str, value: Optional[str]) -> Setting:
        """Insert or overwrite by key.

        A concurrent insert of the same key loses on the unique constraint;
        the loser updates the winner's row instead.
        """

        setting = self.get_by_key(key)
        if setting is None:
            try:
                return self.create(key=key, value=value)
            except IntegrityError:
                setting = self.get_by_key(key)
                if setting is None:
                    raise
        setting.value = value
        commit()
        return setting
