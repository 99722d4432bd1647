from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles for front-desk accounts."""

    ADMIN = "admin"
    STAFF = "staff"


class VisitorStatus(str, Enum):
    """Visitor lifecycle; each value matches one (entry_time, exit_time) pair."""

    REGISTERED = "registered"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"


class ApprovalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class AttendanceLogStatus(str, Enum):
    """One employee work session: open while ACTIVE, closed once COMPLETED."""

    ACTIVE = "active"
    COMPLETED = "completed"


class ScheduledVisitStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    ARRIVED = "arrived"


class PersonType(str, Enum):
    VISITOR = "visitor"
    EMPLOYEE = "employee"


class ScanAction(str, Enum):
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
