from __future__ import annotations

from datetime import datetime

import pytest
from sqlalchemy.dialects import mysql

from frontdesk.core.enums import AttendanceLogStatus
from frontdesk.employees.sql_employee_repository import (
    SqlAttendanceLogRepository,
    SqlEmployeeRepository,
    lock_employee,
)

T0 = datetime(2026, 2, 1, 8, 0, 0)


@pytest.fixture
def repos(app):
    with app.app_context():
        employees = SqlEmployeeRepository()
        employee = employees.create(employee_id="E001", name="Bob", rfid="EMP1")
        yield employee, SqlAttendanceLogRepository()


def test_toggle_locks_the_employee_row():
    sql = str(lock_employee("e1").compile(dialect=mysql.dialect()))
    assert "FOR UPDATE" in sql


def test_toggles_at_the_same_instant_open_then_close(repos):
    employee, logs = repos

    first = logs.toggle_session(employee.id, "EMP1", now=T0)
    second = logs.toggle_session(employee.id, "EMP1", now=T0)

    assert first.id == second.id
    assert second.status == AttendanceLogStatus.COMPLETED.value
    assert second.time_out == T0
    assert len(logs.list_for_employee(employee.id)) == 1


def test_never_more_than_one_open_session(repos):
    employee, logs = repos

    for minute in range(7):
        logs.toggle_session(employee.id, "EMP1", now=T0.replace(minute=minute))

    history = logs.list_for_employee(employee.id)
    open_sessions = [log for log in history if log.time_out is None]
    assert len(history) == 4
    assert len(open_sessions) == 1
    assert open_sessions[0].time_in == T0.replace(minute=6)
