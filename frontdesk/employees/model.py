from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none, now_local
from ..core.enums import AttendanceLogStatus
from ..database.sql_base import new_id
from ..extensions import db


class Employee(db.Model):
    """Staff member with a permanent RFID card.

    Presence is not stored here: an employee is in the building while an
    ACTIVE AttendanceLog without time_out exists.
    """

    __tablename__ = "employees"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    employee_id = db.Column(db.String(50), nullable=False)
    name = db.Column(db.String(120), nullable=False)
    department = db.Column(db.String(120))
    position = db.Column(db.String(120))
    rfid = db.Column(db.String(64), nullable=False, index=True)
    photo_image = db.Column(db.String(255))
    id_scan_image = db.Column(db.String(255))
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=now_local)

    attendance_logs = db.relationship(
        "AttendanceLog",
        back_populates="employee",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "name": self.name,
            "department": self.department,
            "position": self.position,
            "rfid": self.rfid,
            "photoImage": self.photo_image,
            "idScanImage": self.id_scan_image,
            "isActive": self.is_active,
            "createdAt": isoformat_or_none(self.created_at),
        }


class AttendanceLog(db.Model):
    """One work session, opened and closed by consecutive kiosk scans."""

    __tablename__ = "attendance_logs"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    employee_id = db.Column(db.String(36), db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    rfid = db.Column(db.String(64), nullable=False)
    date = db.Column(db.Date, nullable=False)
    time_in = db.Column(db.DateTime, nullable=False)
    time_out = db.Column(db.DateTime)
    status = db.Column(db.String(20), nullable=False, default=AttendanceLogStatus.ACTIVE.value)

    employee = db.relationship("Employee", back_populates="attendance_logs")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "rfid": self.rfid,
            "date": self.date.isoformat() if self.date else None,
            "timeIn": isoformat_or_none(self.time_in),
            "timeOut": isoformat_or_none(self.time_out),
            "status": self.status,
        }
