from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, session

from ..common.http import json_body
from ..common.validators import require_choice
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                raise AuthenticationError("Not logged in")
            if session.get("role") != Role.ADMIN.value:
                raise AuthorizationError("Admin role required")
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        payload = json_body()
        s_user = container.auth_service.authenticate(payload.get("username"), payload.get("password"))

        session.clear()
        session["user_id"] = s_user.user_id
        session["role"] = s_user.role.value
        app.logger.info("User %s logged in", s_user.username)
        return jsonify(s_user.to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    def me():
        user_id = session.get("user_id")
        if not user_id:
            raise AuthenticationError("Not logged in")
        return jsonify(container.auth_service.current(user_id).to_dict())

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @admin_required
    def create_user():
        payload = json_body()
        role = Role(require_choice(payload.get("role", Role.STAFF.value), "role", Role))
        user = container.user_service.create_user(
            username=payload.get("username"),
            password=payload.get("password"),
            role=role,
        )
        app.logger.info("User %s created by %s", user.username, session.get("user_id"))
        return jsonify(user.to_dict()), 201
