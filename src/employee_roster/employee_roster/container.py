from __future__ import annotations

from dataclasses import dataclass

from flask_sqlalchemy import SQLAlchemy

from .employees.service import EmployeeService
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository


@dataclass(frozen=True)
class Container:
    employees_repo: SQLAlchemyEmployeeRepository

    employee_service: EmployeeService


def build_container(*, database: SQLAlchemy) -> Container:
    employees_repo = SQLAlchemyEmployeeRepository(database)
    employee_service = EmployeeService(employees_repo)

    return Container(
        employees_repo=employees_repo,
        employee_service=employee_service,
    )
