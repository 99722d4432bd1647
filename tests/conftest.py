from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from frontdesk.extensions import db
from frontdesk.main import CONTAINER_KEY, create_app


class TickClock:
    """Deterministic clock: every call is one minute after the previous one."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(minutes=1)
        return self.current


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0)


@pytest.fixture
def app(tmp_path):
    app = create_app("config.testing", {"UPLOAD_FOLDER": str(tmp_path / "uploads")})
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def container(app):
    return app.extensions[CONTAINER_KEY]


@pytest.fixture
def clock(container, fixed_now):
    tick = TickClock(fixed_now)
    container.visitor_service._clock = tick
    container.employee_service._clock = tick
    return tick


@pytest.fixture
def client(app, clock):
    return app.test_client()


@pytest.fixture
def destination(client):
    resp = client.post("/api/destinations", json={"name": "Finance", "floor": "3"})
    assert resp.status_code == 201
    return resp.get_json()


@pytest.fixture
def register_visitor(client, destination):
    def _register(**overrides):
        payload = {
            "name": "Alice Nguyen",
            "purpose": "Meeting",
            "rfid": "RF1",
            "destinations": [destination["id"]],
        }
        payload.update(overrides)
        return client.post("/api/visitors", json=payload)

    return _register


@pytest.fixture
def register_employee(client):
    def _register(**overrides):
        payload = {"employeeId": "E001", "name": "Bob Tran", "rfid": "EMP1", "department": "IT"}
        payload.update(overrides)
        return client.post("/api/employees", json=payload)

    return _register
