from __future__ import annotations

import pytest

from src.employee_roster.employee_roster.database.extensions import db
from src.employee_roster.employee_roster.employees.orm import EmployeeRow
from src.employee_roster.employee_roster.main import create_app


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def stored_rows(app):
    """Returns a callable listing (id, name, position) straight from the table."""

    def _rows():
        with app.app_context():
            rows = db.session.execute(db.select(EmployeeRow).order_by(EmployeeRow.id)).scalars().all()
            return [(r.id, r.name, r.position) for r in rows]

    return _rows
