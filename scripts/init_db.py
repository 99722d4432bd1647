from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from frontdesk.database.bootstrap import init_schema, list_tables
from frontdesk.main import create_app


def main() -> None:
    app = create_app(overrides={"AUTO_INIT_DB": False, "AUTO_SEED_DB": False})
    with app.app_context():
        init_schema()
        tables = list_tables()
    print(f"OK: schema ready -> {app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1]} (tables={len(tables)})")


if __name__ == "__main__":
    main()
