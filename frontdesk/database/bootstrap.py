from __future__ import annotations

import logging

from sqlalchemy import inspect, select
from werkzeug.security import generate_password_hash

from ..core.constants import DEFAULT_DESTINATIONS, DEFAULT_SETTINGS
from ..core.enums import Role
from ..destinations.model import Destination
from ..extensions import db
from ..settings.model import Setting
from ..users.model import User

logger = logging.getLogger(__name__)


def _import_models() -> None:
    # Every model must be registered on db.metadata before create_all.
    from ..contacts import model as _contacts  # noqa: F401
    from ..employees import model as _employees  # noqa: F401
    from ..passes import model as _passes  # noqa: F401
    from ..schedules import model as _schedules  # noqa: F401
    from ..visitors import model as _visitors  # noqa: F401


def init_schema() -> None:
    """Create missing tables (idempotent)."""

    _import_models()
    db.create_all()
    logger.info("Schema ready (tables=%d)", len(list_tables()))


def seed_defaults(*, admin_username: str, admin_password: str) -> None:
    """Default admin, settings and destinations; existing rows are left alone."""

    if not db.session.scalars(select(User).where(User.username == admin_username)).first():
        db.session.add(
            User(
                username=admin_username,
                password_hash=generate_password_hash(admin_password),
                role=Role.ADMIN.value,
            )
        )

    existing_keys = set(db.session.scalars(select(Setting.key)))
    for key, value in DEFAULT_SETTINGS.items():
        if key not in existing_keys:
            db.session.add(Setting(key=key, value=value))

    if not db.session.scalars(select(Destination.id).limit(1)).first():
        for name, floor in DEFAULT_DESTINATIONS:
            db.session.add(Destination(name=name, floor=floor))

    db.session.commit()
    logger.info("Default seed ready")


def list_tables() -> list[str]:
    return inspect(db.engine).get_table_names()
