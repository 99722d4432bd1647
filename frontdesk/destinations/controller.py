from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.destination_service

    @app.route("/api/destinations", methods=["GET"], endpoint="list_destinations")
    def list_destinations():
        return jsonify([d.to_dict() for d in service.list_all()])

    @app.route("/api/destinations/<destination_id>", methods=["GET"], endpoint="get_destination")
    def get_destination(destination_id: str):
        return jsonify(service.get(destination_id).to_dict())

    @app.route("/api/destinations", methods=["POST"], endpoint="create_destination")
    def create_destination():
        return jsonify(service.create(json_body()).to_dict()), 201

    @app.route("/api/destinations/<destination_id>", methods=["PATCH"], endpoint="update_destination")
    def update_destination(destination_id: str):
        return jsonify(service.update(destination_id, json_body()).to_dict())

    @app.route("/api/destinations/<destination_id>", methods=["DELETE"], endpoint="delete_destination")
    def delete_destination(destination_id: str):
        service.delete(destination_id)
        return "", 204
