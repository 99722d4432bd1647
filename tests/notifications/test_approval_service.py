from __future__ import annotations

from types import SimpleNamespace

import pytest

from frontdesk.core.enums import ApprovalStatus
from frontdesk.core.exceptions import AlreadyRespondedError, NotFoundError, ValidationError
from frontdesk.notifications.service import ApprovalService, NotificationService


class FakeContactsRepo:
    def __init__(self, contacts):
        self._contacts = {c.id: c for c in contacts}

    def get_by_id(self, contact_id):
        return self._contacts.get(contact_id)


class FakeVisitorsRepo:
    def __init__(self, visitors=()):
        self._visitors = {v.id: v for v in visitors}

    def get_by_id(self, visitor_id):
        return self._visitors.get(visitor_id)

    def update(self, visitor_id, **fields):
        visitor = self._visitors.get(visitor_id)
        if not visitor:
            return None
        for name, value in fields.items():
            setattr(visitor, name, value)
        return visitor

    def get_by_approval_token(self, token):
        return next((v for v in self._visitors.values() if v.approval_token == token), None)

    def record_approval(self, token, response):
        visitor = self.get_by_approval_token(token)
        if not visitor or visitor.approval_status != ApprovalStatus.PENDING.value:
            return None
        visitor.approval_status = response.value
        visitor.approval_token = None
        return visitor


class RecordingGateway:
    def __init__(self):
        self.sent = []

    def send(self, to, body):
        self.sent.append((to, body))


def _visitor(**fields):
    data = dict(
        id="v1",
        name="Alice",
        destination_name="Finance",
        purpose="Meeting",
        approval_token=None,
        approval_status=ApprovalStatus.PENDING.value,
    )
    data.update(fields)
    return SimpleNamespace(**data)


@pytest.fixture
def contact():
    return SimpleNamespace(id="c1", name="Carol", mobile_number="+84900000000")


def test_send_with_visitor_issues_token_and_link(contact):
    visitors = FakeVisitorsRepo([_visitor(approval_status=ApprovalStatus.DENIED.value)])
    gateway = RecordingGateway()
    service = NotificationService(
        FakeContactsRepo([contact]),
        visitors,
        gateway,
        public_base_url="http://kiosk.test/",
        token_factory=lambda: "tok-123",
    )

    receipt = service.send({"contactId": "c1", "visitorId": "v1"}).to_dict()

    assert receipt == {
        "success": True,
        "message": "Notification sent to Carol",
        "recipient": "+84900000000",
        "approvalLink": "http://kiosk.test/approve/tok-123",
    }
    visitor = visitors.get_by_id("v1")
    assert visitor.approval_token == "tok-123"
    assert visitor.approval_status == ApprovalStatus.PENDING.value

    [(to, body)] = gateway.sent
    assert to == "+84900000000"
    assert "Alice" in body and "Finance" in body and "http://kiosk.test/approve/tok-123" in body


def test_send_without_visitor_has_no_link(contact):
    gateway = RecordingGateway()
    service = NotificationService(FakeContactsRepo([contact]), FakeVisitorsRepo(), gateway, public_base_url="http://x")

    receipt = service.send({"contactId": "c1", "visitorName": "Dan", "purpose": "Delivery"}).to_dict()

    assert "approvalLink" not in receipt
    assert "Dan" in gateway.sent[0][1]


def test_send_errors(contact):
    service = NotificationService(FakeContactsRepo([contact]), FakeVisitorsRepo(), RecordingGateway(), public_base_url="http://x")

    with pytest.raises(ValidationError):
        service.send({})
    with pytest.raises(NotFoundError, match="Contact not found"):
        service.send({"contactId": "nope"})
    with pytest.raises(NotFoundError, match="Visitor not found"):
        service.send({"contactId": "c1", "visitorId": "ghost"})


def test_respond_once_then_already_responded_or_expired():
    visitors = FakeVisitorsRepo([_visitor(approval_token="tok")])
    service = ApprovalService(visitors)

    assert service.lookup("tok").name == "Alice"

    visitor = service.respond({"token": "tok", "response": "approved"})
    assert visitor.approval_status == "approved"

    with pytest.raises(NotFoundError, match="link expired"):
        service.respond({"token": "tok", "response": "denied"})
    with pytest.raises(NotFoundError):
        service.lookup("tok")


def test_respond_on_non_pending_token_is_already_responded():
    service = ApprovalService(FakeVisitorsRepo([_visitor(approval_token="tok", approval_status="denied")]))

    with pytest.raises(AlreadyRespondedError, match="Response already submitted"):
        service.respond({"token": "tok", "response": "approved"})


def test_respond_validates_response():
    service = ApprovalService(FakeVisitorsRepo([_visitor(approval_token="tok")]))

    with pytest.raises(ValidationError):
        service.respond({"token": "tok", "response": "pending"})
    with pytest.raises(ValidationError):
        service.respond({"response": "approved"})
