from __future__ import annotations

from datetime import datetime
from typing import Dict

from sqlalchemy import func, select

from ..core.enums import AttendanceLogStatus
from ..employees.model import AttendanceLog, Employee
from ..extensions import db
from ..visitors.model import Visitor


class ReportRepository:
    """Aggregate queries for the front-desk summary; read only."""

    def _count_visitors_between(self, column, start: datetime, end: datetime) -> int:
        stmt = select(func.count()).select_from(Visitor).where(column >= start, column < end)
        return int(db.session.scalar(stmt) or 0)

    def count_registered(self, start: datetime, end: datetime) -> int:
        return self._count_visitors_between(Visitor.created_at, start, end)

    def count_entered(self, start: datetime, end: datetime) -> int:
        return self._count_visitors_between(Visitor.entry_time, start, end)

    def count_exited(self, start: datetime, end: datetime) -> int:
        return self._count_visitors_between(Visitor.exit_time, start, end)

    def count_visitors_inside(self) -> int:
        stmt = (
            select(func.count())
            .select_from(Visitor)
            .where(Visitor.entry_time.is_not(None), Visitor.exit_time.is_(None))
        )
        return int(db.session.scalar(stmt) or 0)

    def count_employees_inside(self) -> int:
        stmt = (
            select(func.count(func.distinct(AttendanceLog.employee_id)))
            .join(Employee, Employee.id == AttendanceLog.employee_id)
            .where(
                Employee.is_active.is_(True),
                AttendanceLog.status == AttendanceLogStatus.ACTIVE.value,
                AttendanceLog.time_out.is_(None),
            )
        )
        return int(db.session.scalar(stmt) or 0)

    def visitors_by_purpose(self, start: datetime, end: datetime) -> Dict[str, int]:
        stmt = (
            select(Visitor.purpose, func.count())
            .where(Visitor.created_at >= start, Visitor.created_at < end)
            .group_by(Visitor.purpose)
            .order_by(Visitor.purpose)
        )
        return {purpose: int(count) for purpose, count in db.session.execute(stmt)}
