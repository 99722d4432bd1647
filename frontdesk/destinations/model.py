from __future__ import annotations

from ..database.sql_base import new_id
from ..extensions import db


class Destination(db.Model):
    """Office or department a visitor can be sent to."""

    __tablename__ = "destinations"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False)
    floor = db.Column(db.String(50))
    description = db.Column(db.Text)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "floor": self.floor,
            "description": self.description,
            "isActive": self.is_active,
        }
