from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..core.enums import AttendanceLogStatus
from ..database.sql_base import SqlAlchemyRepository, commit
from ..extensions import db
from .model import AttendanceLog, Employee
from .repository import AttendanceLogRepository, EmployeeRepository


def lock_employee(employee_id: str):
    """Row lock on the employee; every attendance toggle for them queues behind it.

    Note: SQLite has no row locks and compiles this without FOR UPDATE.
    """
    return select(Employee.id).where(Employee.id == employee_id).with_for_update()


class SqlEmployeeRepository(SqlAlchemyRepository[Employee], EmployeeRepository):
    model = Employee

    def _ordering(self):
        return (Employee.name,)

    def get_active_by_rfid(self, rfid: str) -> Optional[Employee]:
        stmt = (
            select(Employee)
            .where(Employee.rfid == rfid.strip(), Employee.is_active.is_(True))
            .order_by(Employee.created_at)
            .limit(1)
        )
        return db.session.scalars(stmt).first()


class SqlAttendanceLogRepository(SqlAlchemyRepository[AttendanceLog], AttendanceLogRepository):
    model = AttendanceLog

    def _ordering(self):
        return (AttendanceLog.time_in.desc(),)

    def toggle_session(self, employee_id: str, rfid: str, *, now: datetime) -> AttendanceLog:
        try:
            db.session.execute(lock_employee(employee_id))
            log = db.session.scalars(
                select(AttendanceLog)
                .where(
                    AttendanceLog.employee_id == employee_id,
                    AttendanceLog.status == AttendanceLogStatus.ACTIVE.value,
                    AttendanceLog.time_out.is_(None),
                )
                .order_by(AttendanceLog.time_in.desc())
                .limit(1)
                # locking read: sees sessions committed by the toggle we waited on
                .with_for_update()
            ).first()
            if log:
                log.time_out = now
                log.status = AttendanceLogStatus.COMPLETED.value
            else:
                log = AttendanceLog(
                    employee_id=employee_id,
                    rfid=rfid,
                    date=now.date(),
                    time_in=now,
                    status=AttendanceLogStatus.ACTIVE.value,
                )
                db.session.add(log)
        except SQLAlchemyError:
            db.session.rollback()
            raise
        commit()
        return log

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceLog]:
        stmt = (
            select(AttendanceLog)
            .where(AttendanceLog.employee_id == employee_id)
            .order_by(AttendanceLog.time_in.desc())
        )
        return list(db.session.scalars(stmt))

    def list_open_sessions(self) -> Sequence[Tuple[Employee, AttendanceLog]]:
        stmt = (
            select(Employee, AttendanceLog)
            .join(AttendanceLog, AttendanceLog.employee_id == Employee.id)
            .where(
                Employee.is_active.is_(True),
                AttendanceLog.status == AttendanceLogStatus.ACTIVE.value,
                AttendanceLog.time_out.is_(None),
            )
            .order_by(Employee.name, AttendanceLog.time_in.desc())
        )
        seen: set[str] = set()
        sessions = []
        for employee, log in db.session.execute(stmt):
            if employee.id in seen:
                continue
            seen.add(employee.id)
            sessions.append((employee, log))
        return sessions
