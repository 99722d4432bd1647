from __future__ import annotations

from typing import Optional, Protocol

from ..core.exceptions import ConflictError


class _ActiveByRfid(Protocol):
    def get_active_by_rfid(self, rfid: str) -> Optional[object]:
        raise NotImplementedError


class RfidGuard:
    """One physical card may be bound to at most one active person at a time.

    Active means a visitor whose visit has not ended (exit_time IS NULL) or an
    employee account that is still enabled.
    """

    def __init__(self, visitors: _ActiveByRfid, employees: _ActiveByRfid):
        self._visitors = visitors
        self._employees = employees

    def ensure_available(self, rfid: str, *, ignore_employee_id: Optional[str] = None) -> None:
        if self._visitors.get_active_by_rfid(rfid):
            raise ConflictError(
                "This RFID card is already assigned to an active visitor. "
                "Please use a different RFID card or wait for the current visitor to check out."
            )
        employee = self._employees.get_active_by_rfid(rfid)
        if employee and getattr(employee, "id", None) != ignore_employee_id:
            raise ConflictError(
                "This RFID card is already assigned to an active employee. Please use a different RFID card."
            )
