from __future__ import annotations

from ..database.sql_base import new_id
from ..extensions import db


class StaffContact(db.Model):
    """Staff member who can be notified when a visitor arrives."""

    __tablename__ = "staff_contacts"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False)
    department = db.Column(db.String(120))
    mobile_number = db.Column(db.String(32), nullable=False)
    email = db.Column(db.String(255))
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "mobileNumber": self.mobile_number,
            "email": self.email,
            "isActive": self.is_active,
        }
