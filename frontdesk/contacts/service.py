from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import collect_fields, optional_bool, optional_str
from ..core.exceptions import NotFoundError
from .model import StaffContact
from .repository import StaffContactRepository

_FIELDS = {
    "name": ("name", optional_str, True),
    "department": ("department", optional_str, False),
    "mobileNumber": ("mobile_number", optional_str, True),
    "email": ("email", optional_str, False),
    "isActive": ("is_active", optional_bool, False),
}


class StaffContactService:
    def __init__(self, contacts: StaffContactRepository):
        self._contacts = contacts

    def list_all(self) -> Sequence[StaffContact]:
        return self._contacts.list_all()

    def get(self, contact_id: str) -> StaffContact:
        contact = self._contacts.get_by_id(contact_id)
        if not contact:
            raise NotFoundError("Staff contact not found")
        return contact

    def create(self, payload: Mapping[str, Any]) -> StaffContact:
        fields = collect_fields(payload, _FIELDS, partial=False)
        if fields.get("is_active") is None:
            fields.pop("is_active", None)
        return self._contacts.create(**fields)

    def update(self, contact_id: str, payload: Mapping[str, Any]) -> StaffContact:
        fields = collect_fields(payload, _FIELDS, partial=True)
        if "is_active" in fields and fields["is_active"] is None:
            fields.pop("is_active")
        contact = self._contacts.update(contact_id, **fields)
        if not contact:
            raise NotFoundError("Staff contact not found")
        return contact

    def delete(self, contact_id: str) -> None:
        if not self._contacts.delete_by_id(contact_id):
            raise NotFoundError("Staff contact not found")
