from __future__ import annotations

from typing import Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from .model import Employee, NewEmployee
from .orm import EmployeeRow
from .repository import EmployeeRepository


def _to_entity(row: EmployeeRow) -> Employee:
    return Employee(id=int(row.id), name=row.name, position=row.position)


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    """Employee storage on the request-scoped Flask-SQLAlchemy session.

    Errors from the database are raised unchanged after a rollback.
    """

    def __init__(self, database: SQLAlchemy):
        self._db = database

    def list_all(self) -> Sequence[Employee]:
        rows = self._db.session.execute(
            self._db.select(EmployeeRow).order_by(EmployeeRow.id)
        ).scalars().all()
        return [_to_entity(r) for r in rows]

    def insert(self, new_employee: NewEmployee) -> Employee:
        session = self._db.session
        row = EmployeeRow(name=new_employee.name, position=new_employee.position)
        try:
            session.add(row)
            session.flush()
            employee = _to_entity(row)
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            raise
        return employee
