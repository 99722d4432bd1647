from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import collect_fields, optional_str, require_choice
from ..core.enums import ScheduledVisitStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..destinations.repository import DestinationRepository
from .model import ScheduledVisit
from .repository import ScheduledVisitRepository


def _expected_date(value: Any, field_name: str) -> Optional[datetime]:
    return parse_iso_datetime(value) if value is not None else None


_FIELDS = {
    "visitorName": ("visitor_name", optional_str, True),
    "visitorEmail": ("visitor_email", optional_str, False),
    "visitorPhone": ("visitor_phone", optional_str, False),
    "destinationId": ("destination_id", optional_str, False),
    "destinationName": ("destination_name", optional_str, False),
    "hostName": ("host_name", optional_str, True),
    "purpose": ("purpose", optional_str, True),
    "expectedDate": ("expected_date", _expected_date, True),
    "notes": ("notes", optional_str, False),
}


class ScheduledVisitService:
    def __init__(self, visits: ScheduledVisitRepository, destinations: DestinationRepository):
        self._visits = visits
        self._destinations = destinations

    def list_visits(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Sequence[ScheduledVisit]:
        if start and end and start > end:
            raise ValidationError("startDate must not be after endDate")
        return self._visits.list_expected_between(start, end)

    def get(self, visit_id: str) -> ScheduledVisit:
        visit = self._visits.get_by_id(visit_id)
        if not visit:
            raise NotFoundError("Scheduled visit not found")
        return visit

    def create(self, payload: Mapping[str, Any]) -> ScheduledVisit:
        fields = collect_fields(payload, _FIELDS, partial=False)

        destination_id = fields.get("destination_id")
        if destination_id:
            destination = self._destinations.get_by_id(destination_id)
            if not destination:
                raise ValidationError("Unknown destination")
            if not fields.get("destination_name"):
                fields["destination_name"] = destination.name

        return self._visits.create(status=ScheduledVisitStatus.PENDING.value, **fields)

    def update_status(self, visit_id: str, payload: Mapping[str, Any]) -> ScheduledVisit:
        status = require_choice(payload.get("status"), "status", ScheduledVisitStatus)
        visit = self._visits.update(visit_id, status=status)
        if not visit:
            raise NotFoundError("Scheduled visit not found")
        return visit

    def delete(self, visit_id: str) -> None:
        if not self._visits.delete_by_id(visit_id):
            raise NotFoundError("Scheduled visit not found")
