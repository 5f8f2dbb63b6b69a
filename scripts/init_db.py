from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.employee_roster.employee_roster.database.bootstrap import describe_target, init_schema, list_tables
from src.employee_roster.employee_roster.main import create_app


def main() -> None:
    app = create_app({"AUTO_INIT_DB": False})
    with app.app_context():
        init_schema()
        tables = list_tables()
    print(f"OK: Created schema -> {describe_target(app.config['SQLALCHEMY_DATABASE_URI'])} (tables={len(tables)})")


if __name__ == "__main__":
    main()
