import os
import tempfile

SECRET_KEY = "test-secret"

SQLALCHEMY_DATABASE_URI = "sqlite://"
SQLALCHEMY_TRACK_MODIFICATIONS = False

UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "frontdesk-test-uploads")
PUBLIC_BASE_URL = "http://kiosk.test"
LOG_LEVEL = "WARNING"

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"

DEBUG = False
TESTING = True

AUTO_INIT_DB = True
AUTO_SEED_DB = False
