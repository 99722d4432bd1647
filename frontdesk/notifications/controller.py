from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications/send", methods=["POST"], endpoint="send_notification")
    def send_notification():
        return jsonify(container.notification_service.send(json_body()).to_dict())

    @app.route("/api/visitors/approval/<token>", methods=["GET"], endpoint="approval_lookup")
    def approval_lookup(token: str):
        return jsonify(container.approval_service.lookup(token).approval_summary())

    @app.route("/api/visitors/approval", methods=["POST"], endpoint="approval_respond")
    def approval_respond():
        visitor = container.approval_service.respond(json_body())
        return jsonify(
            {
                "success": True,
                "message": "Visitor approved" if visitor.approval_status == "approved" else "Visitor denied",
                "approvalStatus": visitor.approval_status,
            }
        )
