from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_datetime
from ..common.http import json_body, query_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.visitor_service

    @app.route("/api/visitors", methods=["GET"], endpoint="list_visitors")
    def list_visitors():
        start = query_arg("startDate")
        end = query_arg("endDate")
        visitors = service.list_visitors(
            parse_iso_datetime(start) if start else None,
            parse_iso_datetime(end) if end else None,
        )
        return jsonify([v.to_dict() for v in visitors])

    @app.route("/api/visitors/active", methods=["GET"], endpoint="active_visitors")
    def active_visitors():
        return jsonify([v.to_dict() for v in service.list_active()])

    @app.route("/api/visitors/rfid/<rfid>", methods=["GET"], endpoint="visitor_by_rfid")
    def visitor_by_rfid(rfid: str):
        return jsonify(service.get_by_rfid(rfid).to_dict())

    @app.route("/api/visitors/<visitor_id>", methods=["GET"], endpoint="get_visitor")
    def get_visitor(visitor_id: str):
        return jsonify(service.get(visitor_id).to_dict())

    @app.route("/api/visitors", methods=["POST"], endpoint="register_visitor")
    def register_visitor():
        return jsonify(service.register(json_body()).to_dict()), 201

    @app.route("/api/visitors/<visitor_id>", methods=["DELETE"], endpoint="delete_visitor")
    def delete_visitor(visitor_id: str):
        service.delete(visitor_id)
        return "", 204

    @app.route("/api/visitors/check-in", methods=["POST"], endpoint="visitor_check_in")
    def visitor_check_in():
        return jsonify(service.check_in(json_body().get("rfid")).to_dict())

    @app.route("/api/visitors/check-out", methods=["POST"], endpoint="visitor_check_out")
    def visitor_check_out():
        return jsonify(service.check_out(json_body().get("rfid")).to_dict())
