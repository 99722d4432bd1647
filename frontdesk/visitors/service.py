from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from ..common.datetime_utils import now_local
from ..common.rfid_guard import RfidGuard
from ..common.validators import optional_str, parse_id_list, require_non_empty, require_rfid
from ..core.exceptions import NotFoundError, ValidationError
from ..passes.repository import GuestPassRepository
from ..uploads.image_store import ImageStore
from .model import Visitor
from .repository import VisitorRepository

logger = logging.getLogger(__name__)


class _DestinationLookup(Protocol):
    def get_by_id(self, destination_id: str):
        raise NotImplementedError


class VisitorService:
    """Registration plus the registered -> checked_in -> checked_out transitions."""

    def __init__(
        self,
        visitors: VisitorRepository,
        destinations: _DestinationLookup,
        passes: GuestPassRepository,
        rfid_guard: RfidGuard,
        images: ImageStore,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._visitors = visitors
        self._destinations = destinations
        self._passes = passes
        self._rfid_guard = rfid_guard
        self._images = images
        self._clock = clock

    def register(self, payload: Mapping[str, Any]) -> Visitor:
        name = require_non_empty(payload.get("name"), "name")
        purpose = require_non_empty(payload.get("purpose"), "purpose")
        rfid = require_rfid(payload.get("rfid"))
        person_to_visit = optional_str(payload.get("personToVisit"), "personToVisit")
        pass_number = optional_str(payload.get("passNumber"), "passNumber")
        ocr_text = optional_str(payload.get("idOcrText"), "idOcrText")

        destination_ids = parse_id_list(payload.get("destinations"), "destinations")
        primary_id = optional_str(payload.get("destinationId"), "destinationId")
        if primary_id and primary_id not in destination_ids:
            destination_ids.insert(0, primary_id)
        if not destination_ids:
            raise ValidationError("At least one destination is required")

        names = []
        for destination_id in destination_ids:
            destination = self._destinations.get_by_id(destination_id)
            if not destination:
                raise ValidationError(f"Unknown destination: {destination_id}")
            names.append(destination.name)

        self._rfid_guard.ensure_available(rfid)

        if pass_number and not self._passes.claim(pass_number):
            raise ValidationError(f"Guest pass {pass_number} is not available")

        id_scan_image = self._images.save_data_url(payload.get("idScanImage"), name=name, kind="id")
        photo_image = self._images.save_data_url(payload.get("photoImage"), name=name, kind="photo")
        try:
            visitor = self._visitors.create(
                name=name,
                purpose=purpose,
                person_to_visit=person_to_visit,
                destination_id=destination_ids[0],
                destinations=json.dumps(destination_ids),
                destination_name=optional_str(payload.get("destinationName"), "destinationName") or ", ".join(names),
                id_scan_image=id_scan_image,
                id_ocr_text=ocr_text,
                photo_image=photo_image,
                rfid=rfid,
                pass_number=pass_number,
            )
        except Exception:
            self._images.discard(id_scan_image)
            self._images.discard(photo_image)
            if pass_number:
                self._passes.release(pass_number)
            raise

        logger.info("Visitor %s registered with card %s", visitor.id, rfid)
        return visitor

    def list_visitors(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Sequence[Visitor]:
        if start and end and start > end:
            raise ValidationError("startDate must not be after endDate")
        return self._visitors.list_between(start, end)

    def list_active(self) -> Sequence[Visitor]:
        return self._visitors.list_checked_in()

    def get(self, visitor_id: str) -> Visitor:
        visitor = self._visitors.get_by_id(visitor_id)
        if not visitor:
            raise NotFoundError("Visitor not found")
        return visitor

    def get_by_rfid(self, rfid: str) -> Visitor:
        visitor = self._visitors.get_active_by_rfid(rfid)
        if not visitor:
            raise NotFoundError("Visitor not found with this RFID")
        return visitor

    def delete(self, visitor_id: str) -> None:
        if not self._visitors.delete_by_id(visitor_id):
            raise NotFoundError("Visitor not found")

    def try_check_in(self, rfid: str, *, now: Optional[datetime] = None) -> Optional[Visitor]:
        visitor = self._visitors.check_in_by_rfid(rfid, now=now or self._clock())
        if visitor:
            logger.info("Visitor %s checked in", visitor.id)
        return visitor

    def try_check_out(self, rfid: str, *, now: Optional[datetime] = None) -> Optional[Visitor]:
        visitor = self._visitors.check_out_by_rfid(rfid, now=now or self._clock())
        if not visitor:
            return None
        logger.info("Visitor %s checked out", visitor.id)
        if visitor.pass_number and not self._passes.release(visitor.pass_number):
            logger.warning("Guest pass %s was not lent out when visitor %s left", visitor.pass_number, visitor.id)
        return visitor

    def check_in(self, rfid: Any, *, now: Optional[datetime] = None) -> Visitor:
        visitor = self.try_check_in(require_non_empty(rfid, "rfid"), now=now)
        if not visitor:
            raise NotFoundError("No registered visitor found with this RFID")
        return visitor

    def check_out(self, rfid: Any, *, now: Optional[datetime] = None) -> Visitor:
        visitor = self.try_check_out(require_non_empty(rfid, "rfid"), now=now)
        if not visitor:
            raise NotFoundError("No checked-in visitor found with this RFID")
        return visitor
