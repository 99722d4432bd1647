import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY

SQLALCHEMY_DATABASE_URI = Config.SQLALCHEMY_DATABASE_URI
SQLALCHEMY_TRACK_MODIFICATIONS = False
SQLALCHEMY_ENGINE_OPTIONS = Config.SQLALCHEMY_ENGINE_OPTIONS

UPLOAD_FOLDER = Config.UPLOAD_FOLDER
PUBLIC_BASE_URL = Config.PUBLIC_BASE_URL
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEFAULT_ADMIN_USERNAME = Config.DEFAULT_ADMIN_USERNAME
DEFAULT_ADMIN_PASSWORD = Config.DEFAULT_ADMIN_PASSWORD

DEBUG = True

# If enabled, app creates missing tables on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed default admin, settings and destinations on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
