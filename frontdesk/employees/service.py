from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import isoformat_or_none, now_local
from ..common.rfid_guard import RfidGuard
from ..common.validators import collect_fields, optional_bool, optional_str, require_non_empty, require_rfid
from ..core.exceptions import NotFoundError
from ..uploads.image_store import ImageStore
from .model import AttendanceLog, Employee
from .repository import AttendanceLogRepository, EmployeeRepository

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = {
    "employeeId": ("employee_id", optional_str, True),
    "name": ("name", optional_str, True),
    "department": ("department", optional_str, False),
    "position": ("position", optional_str, False),
    "isActive": ("is_active", optional_bool, False),
}


@dataclass(frozen=True)
class AttendanceScan:
    """Result of one attendance toggle."""

    employee: Employee
    log: AttendanceLog

    @property
    def is_check_in(self) -> bool:
        return self.log.time_out is None


@dataclass(frozen=True)
class PresentEmployee:
    employee: Employee
    entry_time: datetime

    def to_dict(self) -> dict:
        return {**self.employee.to_dict(), "entryTime": isoformat_or_none(self.entry_time)}


class EmployeeService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceLogRepository,
        rfid_guard: RfidGuard,
        images: ImageStore,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._attendance = attendance
        self._rfid_guard = rfid_guard
        self._images = images
        self._clock = clock

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_by_rfid(self, rfid: str) -> Employee:
        employee = self._employees.get_active_by_rfid(rfid)
        if not employee:
            raise NotFoundError("Employee not found with this RFID")
        return employee

    def register(self, payload: Mapping[str, Any]) -> Employee:
        employee_code = require_non_empty(payload.get("employeeId"), "employeeId")
        name = require_non_empty(payload.get("name"), "name")
        rfid = require_rfid(payload.get("rfid"))
        is_active = optional_bool(payload.get("isActive"), "isActive")

        self._rfid_guard.ensure_available(rfid)

        photo_image = self._images.save_data_url(payload.get("photoImage"), name=name, kind="photo")
        id_scan_image = self._images.save_data_url(payload.get("idScanImage"), name=name, kind="id")
        try:
            employee = self._employees.create(
                employee_id=employee_code,
                name=name,
                department=optional_str(payload.get("department"), "department"),
                position=optional_str(payload.get("position"), "position"),
                rfid=rfid,
                is_active=True if is_active is None else is_active,
                photo_image=photo_image,
                id_scan_image=id_scan_image,
            )
        except Exception:
            self._images.discard(photo_image)
            self._images.discard(id_scan_image)
            raise

        logger.info("Employee %s registered with card %s", employee.id, rfid)
        return employee

    def update(self, employee_id: str, payload: Mapping[str, Any]) -> Employee:
        current = self.get(employee_id)
        fields = collect_fields(payload, _UPDATABLE_FIELDS, partial=True)
        if "is_active" in fields and fields["is_active"] is None:
            fields.pop("is_active")
        if "rfid" in payload:
            fields["rfid"] = require_rfid(payload.get("rfid"))

        # Enabled on a card not already held: new card or re-enabled account.
        rfid = fields.get("rfid", current.rfid)
        is_active = fields.get("is_active", current.is_active)
        if is_active and (rfid != current.rfid or not current.is_active):
            self._rfid_guard.ensure_available(rfid, ignore_employee_id=current.id)
        employee = self._employees.update(employee_id, **fields)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def delete(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")

    def attendance_history(self, employee_id: str) -> Sequence[AttendanceLog]:
        self.get(employee_id)
        return self._attendance.list_for_employee(employee_id)

    def all_attendance(self) -> Sequence[AttendanceLog]:
        return self._attendance.list_all()

    def present(self) -> Sequence[PresentEmployee]:
        return [PresentEmployee(employee, log.time_in) for employee, log in self._attendance.list_open_sessions()]

    def toggle_attendance(self, rfid: str, *, now: Optional[datetime] = None) -> Optional[AttendanceScan]:
        """Close the employee's open session, or open a new one.

        Returns None when no enabled employee holds the card. The repository
        serializes toggles per employee, so simultaneous scans alternate
        between open and close and never leave two sessions open.
        """

        employee = self._employees.get_active_by_rfid(rfid)
        if not employee:
            return None

        log = self._attendance.toggle_session(employee.id, employee.rfid, now=now or self._clock())
        scan = AttendanceScan(employee, log)
        logger.info("Employee %s timed %s", employee.id, "in" if scan.is_check_in else "out")
        return scan
