from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none, now_local
from ..core.enums import ScheduledVisitStatus
from ..database.sql_base import new_id
from ..extensions import db


class ScheduledVisit(db.Model):
    """A visit booked ahead of time by a host."""

    __tablename__ = "scheduled_visits"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    visitor_name = db.Column(db.String(120), nullable=False)
    visitor_email = db.Column(db.String(120))
    visitor_phone = db.Column(db.String(40))
    destination_id = db.Column(db.String(36), db.ForeignKey("destinations.id", ondelete="SET NULL"))
    destination_name = db.Column(db.String(255))
    host_name = db.Column(db.String(120), nullable=False)
    purpose = db.Column(db.String(255), nullable=False)
    expected_date = db.Column(db.DateTime, nullable=False, index=True)
    notes = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default=ScheduledVisitStatus.PENDING.value)
    created_at = db.Column(db.DateTime, nullable=False, default=now_local)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "visitorName": self.visitor_name,
            "visitorEmail": self.visitor_email,
            "visitorPhone": self.visitor_phone,
            "destinationId": self.destination_id,
            "destinationName": self.destination_name,
            "hostName": self.host_name,
            "purpose": self.purpose,
            "expectedDate": isoformat_or_none(self.expected_date),
            "notes": self.notes,
            "status": self.status,
            "createdAt": isoformat_or_none(self.created_at),
        }
