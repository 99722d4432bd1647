from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([e.to_dict() for e in service.list_all()])

    @app.route("/api/employees/active", methods=["GET"], endpoint="active_employees")
    def active_employees():
        return jsonify([p.to_dict() for p in service.present()])

    @app.route("/api/employees/rfid/<rfid>", methods=["GET"], endpoint="employee_by_rfid")
    def employee_by_rfid(rfid: str):
        return jsonify(service.get_by_rfid(rfid).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(service.get(employee_id).to_dict())

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        return jsonify(service.register(json_body()).to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="update_employee")
    def update_employee(employee_id: str):
        return jsonify(service.update(employee_id, json_body()).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        service.delete(employee_id)
        return "", 204

    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: str):
        return jsonify([log.to_dict() for log in service.attendance_history(employee_id)])

    @app.route("/api/attendance-logs", methods=["GET"], endpoint="list_attendance_logs")
    def list_attendance_logs():
        return jsonify([log.to_dict() for log in service.all_attendance()])
