from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "base, payload, patch, key, value",
    [
        ("/api/destinations", {"name": "Lab", "floor": "5"}, {"floor": "6"}, "floor", "6"),
        ("/api/staff-contacts", {"name": "Carol", "mobileNumber": "+84911"}, {"email": "c@x.vn"}, "email", "c@x.vn"),
    ],
)
def test_crud_round(client, base, payload, patch, key, value):
    created = client.post(base, json=payload)
    assert created.status_code == 201
    item = created.get_json()
    assert item["isActive"] is True

    assert client.get(f"{base}/{item['id']}").status_code == 200
    assert client.patch(f"{base}/{item['id']}", json=patch).get_json()[key] == value
    assert [i["id"] for i in client.get(base).get_json()] == [item["id"]]

    assert client.delete(f"{base}/{item['id']}").status_code == 204
    assert client.get(f"{base}/{item['id']}").status_code == 404
    assert client.patch(f"{base}/{item['id']}", json=patch).status_code == 404
    assert client.delete(f"{base}/{item['id']}").status_code == 404


def test_lists_are_ordered_by_name(client):
    for name in ("Zeta", "Alpha", "Mu"):
        client.post("/api/destinations", json={"name": name})
    assert [d["name"] for d in client.get("/api/destinations").get_json()] == ["Alpha", "Mu", "Zeta"]


def test_required_fields(client):
    assert client.post("/api/destinations", json={"floor": "1"}).status_code == 400
    assert client.post("/api/staff-contacts", json={"name": "No phone"}).status_code == 400


def test_scheduled_visits(client, destination):
    created = client.post(
        "/api/scheduled-visits",
        json={
            "visitorName": "Eve",
            "hostName": "Carol",
            "purpose": "Interview",
            "expectedDate": "2026-02-10T14:00:00",
            "destinationId": destination["id"],
        },
    )
    assert created.status_code == 201
    visit = created.get_json()
    assert visit["status"] == "pending"
    assert visit["destinationName"] == "Finance"

    in_range = client.get("/api/scheduled-visits?startDate=2026-02-10T00:00:00&endDate=2026-02-10T23:59:59")
    assert [v["id"] for v in in_range.get_json()] == [visit["id"]]
    assert client.get("/api/scheduled-visits?startDate=2026-02-11T00:00:00").get_json() == []

    confirmed = client.patch(f"/api/scheduled-visits/{visit['id']}", json={"status": "confirmed"})
    assert confirmed.get_json()["status"] == "confirmed"
    assert client.patch(f"/api/scheduled-visits/{visit['id']}", json={"status": "lost"}).status_code == 400

    assert client.delete(f"/api/scheduled-visits/{visit['id']}").status_code == 204
    assert client.get(f"/api/scheduled-visits/{visit['id']}").status_code == 404


def test_scheduled_visit_validation(client):
    base = {"visitorName": "Eve", "hostName": "Carol", "purpose": "Interview", "expectedDate": "2026-02-10T14:00:00"}

    assert client.post("/api/scheduled-visits", json={**base, "expectedDate": "soon"}).status_code == 400
    assert client.post("/api/scheduled-visits", json={**base, "hostName": None}).status_code == 400
    assert client.post("/api/scheduled-visits", json={**base, "destinationId": "missing"}).status_code == 400


def test_settings_upsert(client):
    first = client.post("/api/settings", json={"key": "building_name", "value": "HQ"})
    assert first.status_code == 201
    second = client.post("/api/settings", json={"key": "building_name", "value": "Annex"})
    assert second.get_json()["id"] == first.get_json()["id"]

    assert client.get("/api/settings/building_name").get_json()["value"] == "Annex"
    assert client.get("/api/settings/missing").status_code == 404
    assert client.post("/api/settings", json={"value": "x"}).status_code == 400
    assert [s["key"] for s in client.get("/api/settings").get_json()] == ["building_name"]


def test_unknown_route_and_method_use_json_errors(client):
    missing = client.get("/api/nothing-here")
    assert missing.status_code == 404
    assert "error" in missing.get_json()

    assert client.put("/api/destinations").status_code == 405
