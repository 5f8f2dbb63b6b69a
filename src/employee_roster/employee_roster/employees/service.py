from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from ..common.validators import check_max_length, check_required
from ..core.constants import MAX_NAME_LENGTH, MAX_POSITION_LENGTH
from ..core.exceptions import ValidationError
from .model import Employee, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

# (field, label, max length) in form order
_FIELDS = (
    ("name", "Name", MAX_NAME_LENGTH),
    ("position", "Position", MAX_POSITION_LENGTH),
)


def validate_employee(name: Optional[str], position: Optional[str]) -> Dict[str, List[str]]:
    """Check the submitted fields; returns {field: [messages]}, empty when valid.

    Values are compared after stripping surrounding whitespace.
    """
    values = {"name": name, "position": position}
    errors: Dict[str, List[str]] = {}
    for field, label, max_len in _FIELDS:
        value = (values[field] or "").strip()
        messages = [
            m
            for m in (check_required(value, label), check_max_length(value, label, max_len))
            if m
        ]
        if messages:
            errors[field] = messages
    return errors


class EmployeeService:
    """Use case: list employees and add a new one."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def add_employee(self, *, name: Optional[str], position: Optional[str]) -> Employee:
        submitted = NewEmployee(name=name or "", position=position or "")
        errors = validate_employee(submitted.name, submitted.position)
        if errors:
            logger.info("Rejected employee submission (invalid fields: %s)", ", ".join(errors))
            raise ValidationError(errors, submitted=submitted)

        employee = self._employees.insert(
            NewEmployee(name=submitted.name.strip(), position=submitted.position.strip())
        )
        logger.info("Created employee id=%s", employee.id)
        return employee
