from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: a persisted employee.

    Plain data object; the ORM row never leaves the repository.
    """

    id: int
    name: str
    position: str


@dataclass(frozen=True)
class NewEmployee:
    """Submitted form values for an employee that has no id yet."""

    name: str = ""
    position: str = ""
