from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

from ..common.datetime_utils import isoformat_or_none
from ..common.validators import require_non_empty
from ..core.enums import PersonType, ScanAction
from ..core.exceptions import NotFoundError
from ..employees.model import AttendanceLog, Employee
from ..employees.service import EmployeeService
from ..visitors.model import Visitor
from ..visitors.service import VisitorService


@dataclass(frozen=True)
class EmployeeScanResult:
    employee: Employee
    log: AttendanceLog
    person_type: PersonType = PersonType.EMPLOYEE

    @property
    def action(self) -> ScanAction:
        return ScanAction.CHECK_IN if self.log.time_out is None else ScanAction.CHECK_OUT

    def to_dict(self) -> dict:
        return {
            **self.employee.to_dict(),
            "personType": self.person_type.value,
            "action": self.action.value,
            "isCheckIn": self.action is ScanAction.CHECK_IN,
            "entryTime": isoformat_or_none(self.log.time_in),
            "exitTime": isoformat_or_none(self.log.time_out),
            "attendanceLogId": self.log.id,
        }


@dataclass(frozen=True)
class VisitorScanResult:
    visitor: Visitor
    action: ScanAction
    person_type: PersonType = PersonType.VISITOR

    def to_dict(self) -> dict:
        return {
            **self.visitor.to_dict(),
            "personType": self.person_type.value,
            "action": self.action.value,
            "isCheckIn": self.action is ScanAction.CHECK_IN,
        }


KioskScanResult = Union[EmployeeScanResult, VisitorScanResult]


class KioskService:
    """Resolve a single card scan at the unattended kiosk.

    Order: employee attendance toggle, then visitor check-in, then visitor
    check-out. A card nobody holds in a matching state is a NotFoundError.
    """

    def __init__(self, employees: EmployeeService, visitors: VisitorService):
        self._employees = employees
        self._visitors = visitors

    def scan(self, rfid: Any, *, now: Optional[datetime] = None) -> KioskScanResult:
        rfid = require_non_empty(rfid, "rfid")

        attendance = self._employees.toggle_attendance(rfid, now=now)
        if attendance:
            return EmployeeScanResult(attendance.employee, attendance.log)

        visitor = self._visitors.try_check_in(rfid, now=now)
        if visitor:
            return VisitorScanResult(visitor, ScanAction.CHECK_IN)

        visitor = self._visitors.try_check_out(rfid, now=now)
        if visitor:
            return VisitorScanResult(visitor, ScanAction.CHECK_OUT)

        raise NotFoundError("No person recorded with this RFID")
