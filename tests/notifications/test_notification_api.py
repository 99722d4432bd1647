from __future__ import annotations


def _contact(client):
    resp = client.post("/api/staff-contacts", json={"name": "Carol", "mobileNumber": "+84900000000"})
    assert resp.status_code == 201
    return resp.get_json()


def test_approval_flow(client, register_visitor):
    visitor = register_visitor().get_json()
    contact = _contact(client)

    sent = client.post("/api/notifications/send", json={"contactId": contact["id"], "visitorId": visitor["id"]})
    assert sent.status_code == 200
    link = sent.get_json()["approvalLink"]
    assert link.startswith("http://kiosk.test/approve/")
    token = link.rsplit("/", 1)[-1]

    summary = client.get(f"/api/visitors/approval/{token}")
    assert summary.status_code == 200
    assert summary.get_json()["name"] == "Alice Nguyen"
    assert summary.get_json()["approvalStatus"] == "pending"

    answered = client.post("/api/visitors/approval", json={"token": token, "response": "approved"})
    assert answered.status_code == 200
    assert answered.get_json() == {"success": True, "message": "Visitor approved", "approvalStatus": "approved"}

    assert client.get(f"/api/visitors/{visitor['id']}").get_json()["approvalStatus"] == "approved"
    assert client.get(f"/api/visitors/approval/{token}").status_code == 404
    assert client.post("/api/visitors/approval", json={"token": token, "response": "denied"}).status_code == 404


def test_deny_and_bad_response(client, register_visitor):
    visitor = register_visitor().get_json()
    contact = _contact(client)
    token = (
        client.post("/api/notifications/send", json={"contactId": contact["id"], "visitorId": visitor["id"]})
        .get_json()["approvalLink"]
        .rsplit("/", 1)[-1]
    )

    assert client.post("/api/visitors/approval", json={"token": token, "response": "maybe"}).status_code == 400

    denied = client.post("/api/visitors/approval", json={"token": token, "response": "denied"})
    assert denied.get_json()["message"] == "Visitor denied"


def test_send_unknown_contact_or_visitor(client):
    assert client.post("/api/notifications/send", json={"contactId": "nope"}).status_code == 404

    contact = _contact(client)
    resp = client.post("/api/notifications/send", json={"contactId": contact["id"], "visitorId": "ghost"})
    assert resp.status_code == 404

    plain = client.post("/api/notifications/send", json={"contactId": contact["id"], "visitorName": "Dan"})
    assert plain.status_code == 200
    assert "approvalLink" not in plain.get_json()
