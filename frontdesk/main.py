from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register_error_handlers
from .container import build_container
from .database.bootstrap import init_schema, seed_defaults
from .extensions import db

from .contacts.controller import register as register_contacts
from .destinations.controller import register as register_destinations
from .employees.controller import register as register_employees
from .kiosk.controller import register as register_kiosk
from .notifications.controller import register as register_notifications
from .passes.controller import register as register_passes
from .reports.controller import register as register_reports
from .schedules.controller import register as register_schedules
from .settings.controller import register as register_settings
from .uploads.controller import register as register_uploads
from .users.controller import register as register_users
from .visitors.controller import register as register_visitors

CONTAINER_KEY = "frontdesk.container"


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger("frontdesk").setLevel(level)


def create_app(settings_module: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    if overrides:
        app.config.update(overrides)

    _configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    app.logger.debug("settings=%s db=%s", settings_module, app.config["SQLALCHEMY_DATABASE_URI"].split("@")[-1])

    db.init_app(app)
    register_error_handlers(app)

    container = build_container(app.config)
    app.extensions[CONTAINER_KEY] = container

    with app.app_context():
        if app.config.get("AUTO_INIT_DB"):
            init_schema()
        if app.config.get("AUTO_SEED_DB"):
            seed_defaults(
                admin_username=app.config["DEFAULT_ADMIN_USERNAME"],
                admin_password=app.config["DEFAULT_ADMIN_PASSWORD"],
            )

    register_users(app, container)
    register_destinations(app, container)
    register_contacts(app, container)
    register_passes(app, container)
    register_kiosk(app, container)
    register_notifications(app, container)
    register_visitors(app, container)
    register_employees(app, container)
    register_schedules(app, container)
    register_settings(app, container)
    register_reports(app, container)
    register_uploads(app, container)

    return app
