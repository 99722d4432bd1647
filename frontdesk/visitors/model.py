from __future__ import annotations

import json

from ..common.datetime_utils import isoformat_or_none, now_local
from ..core.enums import ApprovalStatus, VisitorStatus
from ..database.sql_base import new_id
from ..extensions import db


class Visitor(db.Model):
    """One visit: registered at the desk, then checked in and out by RFID scan.

    `status` always mirrors the timestamp pair: no entry_time => registered,
    entry_time without exit_time => checked_in, both => checked_out.
    """

    __tablename__ = "visitors"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False)
    purpose = db.Column(db.String(120), nullable=False)
    person_to_visit = db.Column(db.String(120))

    destination_id = db.Column(db.String(36), db.ForeignKey("destinations.id", ondelete="SET NULL"))
    destinations = db.Column(db.Text, nullable=False, default="[]")  # JSON array of destination ids
    destination_name = db.Column(db.String(255))

    id_scan_image = db.Column(db.String(255))
    id_ocr_text = db.Column(db.Text)
    photo_image = db.Column(db.String(255))

    rfid = db.Column(db.String(64), index=True)
    pass_number = db.Column(db.String(32))

    entry_time = db.Column(db.DateTime)
    exit_time = db.Column(db.DateTime)
    status = db.Column(db.String(20), nullable=False, default=VisitorStatus.REGISTERED.value)

    approval_status = db.Column(db.String(20), default=ApprovalStatus.PENDING.value)
    approval_token = db.Column(db.String(64), index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=now_local)

    destination = db.relationship("Destination")

    @property
    def destination_ids(self) -> list[str]:
        try:
            return list(json.loads(self.destinations or "[]"))
        except ValueError:
            return []

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "purpose": self.purpose,
            "personToVisit": self.person_to_visit,
            "destinationId": self.destination_id,
            "destinations": self.destination_ids,
            "destinationName": self.destination_name,
            "idScanImage": self.id_scan_image,
            "idOcrText": self.id_ocr_text,
            "photoImage": self.photo_image,
            "rfid": self.rfid,
            "passNumber": self.pass_number,
            "entryTime": isoformat_or_none(self.entry_time),
            "exitTime": isoformat_or_none(self.exit_time),
            "status": self.status,
            "approvalStatus": self.approval_status,
            "createdAt": isoformat_or_none(self.created_at),
        }

    def approval_summary(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "destinationName": self.destination_name,
            "personToVisit": self.person_to_visit,
            "purpose": self.purpose,
            "approvalStatus": self.approval_status,
        }
