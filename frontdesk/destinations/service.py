from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import collect_fields, optional_bool, optional_str
from ..core.exceptions import NotFoundError
from .model import Destination
from .repository import DestinationRepository

_FIELDS = {
    "name": ("name", optional_str, True),
    "floor": ("floor", optional_str, False),
    "description": ("description", optional_str, False),
    "isActive": ("is_active", optional_bool, False),
}


class DestinationService:
    def __init__(self, destinations: DestinationRepository):
        self._destinations = destinations

    def list_all(self) -> Sequence[Destination]:
        return self._destinations.list_all()

    def get(self, destination_id: str) -> Destination:
        destination = self._destinations.get_by_id(destination_id)
        if not destination:
            raise NotFoundError("Destination not found")
        return destination

    def create(self, payload: Mapping[str, Any]) -> Destination:
        fields = collect_fields(payload, _FIELDS, partial=False)
        if fields.get("is_active") is None:
            fields.pop("is_active", None)
        return self._destinations.create(**fields)

    def update(self, destination_id: str, payload: Mapping[str, Any]) -> Destination:
        fields = collect_fields(payload, _FIELDS, partial=True)
        if "is_active" in fields and fields["is_active"] is None:
            fields.pop("is_active")
        destination = self._destinations.update(destination_id, **fields)
        if not destination:
            raise NotFoundError("Destination not found")
        return destination

    def delete(self, destination_id: str) -> None:
        if not self._destinations.delete_by_id(destination_id):
            raise NotFoundError("Destination not found")
