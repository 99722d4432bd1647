from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.setting_service

    @app.route("/api/settings", methods=["GET"], endpoint="list_settings")
    def list_settings():
        return jsonify([s.to_dict() for s in service.list_all()])

    @app.route("/api/settings/<key>", methods=["GET"], endpoint="get_setting")
    def get_setting(key: str):
        return jsonify(service.get(key).to_dict())

    @app.route("/api/settings", methods=["POST"], endpoint="upsert_setting")
    def upsert_setting():
        return jsonify(service.upsert(json_body()).to_dict()), 201
