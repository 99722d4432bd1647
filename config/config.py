import os
import urllib.parse

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def build_database_uri() -> str:
    """DATABASE_URL wins; otherwise build a mysql-connector URI from DB_* variables."""

    url = os.environ.get("DATABASE_URL")
    if url:
        return url

    db_user = os.environ.get("DB_USER", "root")
    db_password = os.environ.get("DB_PASSWORD", "123456")
    db_host = os.environ.get("DB_HOST", "localhost")
    db_port = int(os.environ.get("DB_PORT", "3306"))
    db_name = os.environ.get("DB_NAME", "frontdesk_db")

    # Mã hóa mật khẩu để xử lý ký tự '@' an toàn
    encoded_password = urllib.parse.quote_plus(db_password)
    return f"mysql+mysqlconnector://{db_user}:{encoded_password}@{db_host}:{db_port}/{db_name}"


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "frontdesk-dev-secret"

    SQLALCHEMY_DATABASE_URI = build_database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    PUBLIC_BASE_URL = os.environ.get("PUBLIC_BASE_URL", "http://localhost:5000")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    DEFAULT_ADMIN_USERNAME = os.environ.get("DEFAULT_ADMIN_USERNAME", "admin")
    DEFAULT_ADMIN_PASSWORD = os.environ.get("DEFAULT_ADMIN_PASSWORD", "admin123")

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
    AUTO_SEED_DB = bool(int(os.environ.get("AUTO_SEED_DB", "0")))
