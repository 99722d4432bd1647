from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, Sequence, Tuple

from .model import AttendanceLog, Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_active_by_rfid(self, rfid: str) -> Optional[Employee]:
        """Enabled employee (is_active) holding this card."""

        raise NotImplementedError

    def create(self, **fields: Any) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: str, **fields: Any) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError


class AttendanceLogRepository(Protocol):
    def toggle_session(self, employee_id: str, rfid: str, *, now: datetime) -> AttendanceLog:
        """Close the open session or open a new one, in one transaction.

        Concurrent toggles for the same employee are serialized, so they can
        never produce two open sessions.
        """

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceLog]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceLog]:
        raise NotImplementedError

    def list_open_sessions(self) -> Sequence[Tuple[Employee, AttendanceLog]]:
        """Enabled employees currently inside, with their open log."""

        raise NotImplementedError
