from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.staff_contact_service

    @app.route("/api/staff-contacts", methods=["GET"], endpoint="list_staff_contacts")
    def list_staff_contacts():
        return jsonify([c.to_dict() for c in service.list_all()])

    @app.route("/api/staff-contacts/<contact_id>", methods=["GET"], endpoint="get_staff_contact")
    def get_staff_contact(contact_id: str):
        return jsonify(service.get(contact_id).to_dict())

    @app.route("/api/staff-contacts", methods=["POST"], endpoint="create_staff_contact")
    def create_staff_contact():
        return jsonify(service.create(json_body()).to_dict()), 201

    @app.route("/api/staff-contacts/<contact_id>", methods=["PATCH"], endpoint="update_staff_contact")
    def update_staff_contact(contact_id: str):
        return jsonify(service.update(contact_id, json_body()).to_dict())

    @app.route("/api/staff-contacts/<contact_id>", methods=["DELETE"], endpoint="delete_staff_contact")
    def delete_staff_contact(contact_id: str):
        service.delete(contact_id)
        return "", 204
