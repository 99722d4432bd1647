from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select

from ..database.sql_base import SqlAlchemyRepository
from ..extensions import db
from .model import ScheduledVisit
from .repository import ScheduledVisitRepository


class SqlScheduledVisitRepository(SqlAlchemyRepository[ScheduledVisit], ScheduledVisitRepository):
    model = ScheduledVisit

    def _ordering(self):
        return (ScheduledVisit.expected_date,)

    def list_expected_between(self, start: Optional[datetime], end: Optional[datetime]) -> Sequence[ScheduledVisit]:
        stmt = select(ScheduledVisit)
        if start:
            stmt = stmt.where(ScheduledVisit.expected_date >= start)
        if end:
            stmt = stmt.where(ScheduledVisit.expected_date <= end)
        return list(db.session.scalars(stmt.order_by(*self._ordering())))
