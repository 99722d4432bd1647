from __future__ import annotations


def test_generate_and_qr(client):
    resp = client.post("/api/guest-passes/generate", json={"count": 3})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["count"] == 3
    numbers = [p["passNumber"] for p in body["passes"]]
    assert len(set(numbers)) == 3
    assert all(n.startswith("V") and len(n) == 5 for n in numbers)

    qr = client.get(f"/api/guest-passes/{body['passes'][0]['id']}/qr")
    assert qr.status_code == 200
    assert qr.mimetype == "image/png"
    assert qr.data.startswith(b"\x89PNG")

    assert client.post("/api/guest-passes/generate", json={"count": 0}).status_code == 400
    assert client.post("/api/guest-passes/generate", json={"count": 101}).status_code == 400


def test_pass_is_claimed_at_registration_and_released_at_check_out(client, register_visitor):
    guest_pass = client.post("/api/guest-passes", json={"passNumber": "V0042"}).get_json()
    assert guest_pass["isAvailable"] is True

    assert register_visitor(passNumber="V0042").status_code == 201
    assert client.get(f"/api/guest-passes/{guest_pass['id']}").get_json()["isAvailable"] is False

    taken = register_visitor(rfid="RF2", passNumber="V0042")
    assert taken.status_code == 400

    client.post("/api/visitors/check-in", json={"rfid": "RF1"})
    client.post("/api/visitors/check-out", json={"rfid": "RF1"})
    assert client.get(f"/api/guest-passes/{guest_pass['id']}").get_json()["isAvailable"] is True


def test_crud_and_404s(client):
    created = client.post("/api/guest-passes", json={"passNumber": "V0001"})
    assert created.status_code == 201
    pass_id = created.get_json()["id"]

    assert client.post("/api/guest-passes", json={"passNumber": "V0001"}).status_code == 400
    assert client.patch(f"/api/guest-passes/{pass_id}", json={"isAvailable": False}).get_json()["isAvailable"] is False
    assert [p["id"] for p in client.get("/api/guest-passes").get_json()] == [pass_id]

    assert client.delete(f"/api/guest-passes/{pass_id}").status_code == 204
    assert client.get(f"/api/guest-passes/{pass_id}").status_code == 404
    assert client.get(f"/api/guest-passes/{pass_id}/qr").status_code == 404
    assert client.patch(f"/api/guest-passes/{pass_id}", json={"isAvailable": True}).status_code == 404
