from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee, NewEmployee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    The service layer depends on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def insert(self, new_employee: NewEmployee) -> Employee:
        raise NotImplementedError
