from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/visitors/kiosk", methods=["POST"], endpoint="kiosk_scan")
    def kiosk_scan():
        result = container.kiosk_service.scan(json_body().get("rfid"))
        return jsonify(result.to_dict())
