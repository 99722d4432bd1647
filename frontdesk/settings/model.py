from __future__ import annotations

from ..database.sql_base import new_id
from ..extensions import db


class Setting(db.Model):
    __tablename__ = "settings"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    key = db.Column(db.String(120), nullable=False, unique=True)
    value = db.Column(db.Text)

    def to_dict(self) -> dict:
        return {"id": self.id, "key": self.key, "value": self.value}
