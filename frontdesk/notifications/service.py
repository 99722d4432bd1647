from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..common.validators import optional_str, require_choice, require_non_empty
from ..contacts.repository import StaffContactRepository
from ..core.enums import ApprovalStatus
from ..core.exceptions import AlreadyRespondedError, NotFoundError
from ..visitors.model import Visitor
from ..visitors.repository import VisitorRepository
from .sms import SmsGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationReceipt:
    contact_name: str
    recipient: str
    approval_link: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "success": True,
            "message": f"Notification sent to {self.contact_name}",
            "recipient": self.recipient,
        }
        if self.approval_link:
            data["approvalLink"] = self.approval_link
        return data


def _new_token() -> str:
    return str(uuid.uuid4())


class NotificationService:
    """Tell a staff contact that a visitor has arrived.

    When the visitor is known a one-time approval token is minted and the
    message carries a link the contact can use to allow or deny the visit.
    """

    def __init__(
        self,
        contacts: StaffContactRepository,
        visitors: VisitorRepository,
        gateway: SmsGateway,
        *,
        public_base_url: str,
        token_factory: Callable[[], str] = _new_token,
    ):
        self._contacts = contacts
        self._visitors = visitors
        self._gateway = gateway
        self._base_url = public_base_url.rstrip("/")
        self._token_factory = token_factory

    def send(self, payload: Mapping[str, Any]) -> NotificationReceipt:
        contact_id = require_non_empty(payload.get("contactId"), "contactId")
        visitor_id = optional_str(payload.get("visitorId"), "visitorId")
        visitor_name = optional_str(payload.get("visitorName"), "visitorName")
        destination = optional_str(payload.get("destination"), "destination")
        purpose = optional_str(payload.get("purpose"), "purpose")

        contact = self._contacts.get_by_id(contact_id)
        if not contact:
            raise NotFoundError("Contact not found")

        approval_link = None
        if visitor_id:
            token = self._token_factory()
            visitor = self._visitors.update(
                visitor_id,
                approval_token=token,
                approval_status=ApprovalStatus.PENDING.value,
            )
            if not visitor:
                raise NotFoundError("Visitor not found")
            visitor_name = visitor_name or visitor.name
            destination = destination or visitor.destination_name
            purpose = purpose or visitor.purpose
            approval_link = f"{self._base_url}/approve/{token}"

        who = f"Visitor {visitor_name}" if visitor_name else "A visitor"
        arrival = f"{who} has arrived at {destination or 'reception'} for {purpose or 'a visit'}."
        if approval_link:
            message = f"{arrival} Allow Visitor? Reply at: {approval_link}"
        else:
            message = f"{arrival} Please come to the reception desk."

        self._gateway.send(contact.mobile_number, message)
        logger.info("Notified contact %s (%s)", contact.id, contact.name)
        return NotificationReceipt(contact.name, contact.mobile_number, approval_link)


class ApprovalService:
    """pending -> approved | denied, answered once per token."""

    def __init__(self, visitors: VisitorRepository):
        self._visitors = visitors

    def lookup(self, token: str) -> Visitor:
        visitor = self._visitors.get_by_approval_token(token)
        if not visitor:
            raise NotFoundError("Visitor not found or link expired")
        return visitor

    def respond(self, payload: Mapping[str, Any]) -> Visitor:
        token = require_non_empty(payload.get("token"), "token")
        response = ApprovalStatus(
            require_choice(payload.get("response"), "response", (ApprovalStatus.APPROVED, ApprovalStatus.DENIED))
        )

        visitor = self._visitors.record_approval(token, response)
        if visitor:
            logger.info("Visitor %s %s by host", visitor.id, response.value)
            return visitor

        # Nothing pending under this token: tell "already answered" from "unknown".
        if self._visitors.get_by_approval_token(token):
            raise AlreadyRespondedError("Response already submitted")
        raise NotFoundError("Visitor not found or link expired")
