from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_datetime
from ..common.http import json_body, query_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.scheduled_visit_service

    @app.route("/api/scheduled-visits", methods=["GET"], endpoint="list_scheduled_visits")
    def list_scheduled_visits():
        start = query_arg("startDate")
        end = query_arg("endDate")
        visits = service.list_visits(
            parse_iso_datetime(start) if start else None,
            parse_iso_datetime(end) if end else None,
        )
        return jsonify([v.to_dict() for v in visits])

    @app.route("/api/scheduled-visits/<visit_id>", methods=["GET"], endpoint="get_scheduled_visit")
    def get_scheduled_visit(visit_id: str):
        return jsonify(service.get(visit_id).to_dict())

    @app.route("/api/scheduled-visits", methods=["POST"], endpoint="create_scheduled_visit")
    def create_scheduled_visit():
        return jsonify(service.create(json_body()).to_dict()), 201

    @app.route("/api/scheduled-visits/<visit_id>", methods=["PATCH"], endpoint="update_scheduled_visit")
    def update_scheduled_visit(visit_id: str):
        return jsonify(service.update_status(visit_id, json_body()).to_dict())

    @app.route("/api/scheduled-visits/<visit_id>", methods=["DELETE"], endpoint="delete_scheduled_visit")
    def delete_scheduled_visit(visit_id: str):
        service.delete(visit_id)
        return "", 204
