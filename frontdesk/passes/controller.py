from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.guest_pass_service

    @app.route("/api/guest-passes", methods=["GET"], endpoint="list_guest_passes")
    def list_guest_passes():
        return jsonify([p.to_dict() for p in service.list_all()])

    @app.route("/api/guest-passes/<pass_id>", methods=["GET"], endpoint="get_guest_pass")
    def get_guest_pass(pass_id: str):
        return jsonify(service.get(pass_id).to_dict())

    @app.route("/api/guest-passes/<pass_id>/qr", methods=["GET"], endpoint="guest_pass_qr")
    def guest_pass_qr(pass_id: str):
        return app.response_class(service.qr_png(pass_id), mimetype="image/png")

    @app.route("/api/guest-passes", methods=["POST"], endpoint="create_guest_pass")
    def create_guest_pass():
        return jsonify(service.create(json_body()).to_dict()), 201

    @app.route("/api/guest-passes/generate", methods=["POST"], endpoint="generate_guest_passes")
    def generate_guest_passes():
        passes = service.generate(json_body().get("count"))
        return jsonify({"passes": [p.to_dict() for p in passes], "count": len(passes)}), 201

    @app.route("/api/guest-passes/<pass_id>", methods=["PATCH"], endpoint="update_guest_pass")
    def update_guest_pass(pass_id: str):
        return jsonify(service.update(pass_id, json_body()).to_dict())

    @app.route("/api/guest-passes/<pass_id>", methods=["DELETE"], endpoint="delete_guest_pass")
    def delete_guest_pass(pass_id: str):
        service.delete(pass_id)
        return "", 204
