from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none, now_local
from ..database.sql_base import new_id
from ..extensions import db


class GuestPass(db.Model):
    """Reusable physical pass, lent to one visitor for one visit."""

    __tablename__ = "guest_passes"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    pass_number = db.Column(db.String(32), unique=True, nullable=False)
    qr_code = db.Column(db.String(255))
    is_available = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=now_local)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "passNumber": self.pass_number,
            "qrCode": self.qr_code,
            "isAvailable": self.is_available,
            "createdAt": isoformat_or_none(self.created_at),
        }
