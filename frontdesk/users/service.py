from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError
from .model import User
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    username: str
    role: Role

    def to_dict(self) -> dict:
        return {"id": self.user_id, "username": self.username, "role": self.role.value}


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        if not isinstance(username, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid username or password")

        user = self._users.get_by_username(username.strip())
        if not user:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # Unknown hash method, e.g. a placeholder written by hand.
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        return SessionUser(user_id=user.id, username=user.username, role=Role(user.role))

    def current(self, user_id: str) -> SessionUser:
        user = self._users.get_by_id(user_id)
        if not user:
            raise AuthenticationError("Not logged in")
        return SessionUser(user_id=user.id, username=user.username, role=Role(user.role))


class UserService:
    def __init__(self, users: UserRepository):
        self._users = users

    def create_user(self, *, username: str, password: str, role: Role = Role.STAFF) -> User:
        username = require_non_empty(username, "username")
        password = require_min_length(password, "password", 6)

        if self._users.get_by_username(username):
            raise ConflictError("Username already exists")

        return self._users.create(
            username=username,
            password_hash=generate_password_hash(password),
            role=role.value,
        )
