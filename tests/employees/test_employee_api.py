from __future__ import annotations

import base64


def test_register_and_lookup(client, register_employee):
    resp = register_employee(position="Engineer")
    assert resp.status_code == 201
    employee = resp.get_json()
    assert employee["employeeId"] == "E001"
    assert employee["isActive"] is True

    assert client.get(f"/api/employees/{employee['id']}").get_json()["position"] == "Engineer"
    assert client.get("/api/employees/rfid/EMP1").get_json()["id"] == employee["id"]
    assert [e["id"] for e in client.get("/api/employees").get_json()] == [employee["id"]]


def test_registration_validation_and_conflicts(client, register_employee, register_visitor):
    assert register_employee(employeeId="").status_code == 400
    assert register_employee(name=None).status_code == 400
    assert register_employee(rfid="").status_code == 400

    assert register_employee().status_code == 201
    dup = register_employee(employeeId="E002")
    assert dup.status_code == 400
    assert "active employee" in dup.get_json()["error"]

    register_visitor(rfid="RF9")
    assert register_employee(employeeId="E003", rfid="RF9").status_code == 400


def test_update_keeps_own_card_but_not_anothers(client, register_employee):
    first = register_employee().get_json()
    register_employee(employeeId="E002", name="Chi", rfid="EMP2")

    same = client.patch(f"/api/employees/{first['id']}", json={"rfid": "EMP1", "department": "HR"})
    assert same.status_code == 200
    assert same.get_json()["department"] == "HR"

    assert client.patch(f"/api/employees/{first['id']}", json={"rfid": "EMP2"}).status_code == 400
    assert client.patch(f"/api/employees/{first['id']}", json={"name": ""}).status_code == 400
    assert client.patch("/api/employees/missing", json={"name": "X"}).status_code == 404


def test_disabled_employee_frees_the_card(client, register_employee):
    first = register_employee().get_json()
    client.patch(f"/api/employees/{first['id']}", json={"isActive": False})

    assert client.get("/api/employees/rfid/EMP1").status_code == 404
    assert register_employee(employeeId="E002").status_code == 201


def test_delete_removes_attendance_history(client, register_employee):
    employee = register_employee().get_json()
    client.post("/api/visitors/kiosk", json={"rfid": "EMP1"})
    assert len(client.get("/api/attendance-logs").get_json()) == 1

    assert client.delete(f"/api/employees/{employee['id']}").status_code == 204
    assert client.get(f"/api/employees/{employee['id']}").status_code == 404
    assert client.get(f"/api/employees/{employee['id']}/attendance").status_code == 404
    assert client.get("/api/attendance-logs").get_json() == []


def test_reenabling_is_refused_when_card_went_to_another_employee(client, register_employee):
    first = register_employee().get_json()
    client.patch(f"/api/employees/{first['id']}", json={"isActive": False})
    second = register_employee(employeeId="E002", name="Chi").get_json()

    resp = client.patch(f"/api/employees/{first['id']}", json={"isActive": True})

    assert resp.status_code == 400
    assert "active employee" in resp.get_json()["error"]
    assert client.get(f"/api/employees/{first['id']}").get_json()["isActive"] is False
    assert client.get("/api/employees/rfid/EMP1").get_json()["id"] == second["id"]


def test_reenabling_is_refused_when_card_went_to_a_visitor(client, register_employee, register_visitor):
    employee = register_employee().get_json()
    client.patch(f"/api/employees/{employee['id']}", json={"isActive": False})
    assert register_visitor(rfid="EMP1").status_code == 201

    resp = client.patch(f"/api/employees/{employee['id']}", json={"isActive": True})
    assert resp.status_code == 400
    assert "active visitor" in resp.get_json()["error"]

    scan = client.post("/api/visitors/kiosk", json={"rfid": "EMP1"}).get_json()
    assert scan["personType"] == "visitor"


def test_reenabling_with_free_card_succeeds(client, register_employee):
    employee = register_employee().get_json()
    client.patch(f"/api/employees/{employee['id']}", json={"isActive": False})

    resp = client.patch(f"/api/employees/{employee['id']}", json={"isActive": True})
    assert resp.status_code == 200
    assert resp.get_json()["isActive"] is True


def test_failed_insert_leaves_no_images(client, container, register_employee, tmp_path, monkeypatch):
    photo = "data:image/png;base64," + base64.b64encode(b"\x89PNG\r\n\x1a\nfake").decode()

    def fail(**fields):
        raise RuntimeError("insert failed")

    monkeypatch.setattr(container.employee_service._employees, "create", fail)

    assert register_employee(photoImage=photo).status_code == 500
    assert list((tmp_path / "uploads").iterdir()) == []
