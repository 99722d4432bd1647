from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none, now_local
from ..core.enums import Role
from ..database.sql_base import new_id
from ..extensions import db


class User(db.Model):
    """Front-desk operator account."""

    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    username = db.Column(db.String(80), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=Role.STAFF.value)
    created_at = db.Column(db.DateTime, nullable=False, default=now_local)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "createdAt": isoformat_or_none(self.created_at),
        }
