from __future__ import annotations

from ..database.sql_base import SqlAlchemyRepository
from .model import StaffContact
from .repository import StaffContactRepository


class SqlStaffContactRepository(SqlAlchemyRepository[StaffContact], StaffContactRepository):
    model = StaffContact

    def _ordering(self):
        return (StaffContact.name,)
