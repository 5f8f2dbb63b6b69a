from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.employee_roster.employee_roster.container import build_container
from src.employee_roster.employee_roster.database.bootstrap import describe_target, init_schema
from src.employee_roster.employee_roster.database.extensions import db
from src.employee_roster.employee_roster.main import create_app

DEMO_EMPLOYEES = [
    ("Ada Lovelace", "Engineer"),
    ("Grace Hopper", "Rear Admiral"),
    ("Alan Turing", "Researcher"),
]


def main() -> None:
    app = create_app()
    with app.app_context():
        init_schema()
        service = build_container(database=db).employee_service
        if service.list_employees():
            print("SKIP: employees table already has rows")
            return
        for name, position in DEMO_EMPLOYEES:
            service.add_employee(name=name, position=position)

    print(f"OK: Seeded {len(DEMO_EMPLOYEES)} employees -> {describe_target(app.config['SQLALCHEMY_DATABASE_URI'])}")


if __name__ == "__main__":
    main()
