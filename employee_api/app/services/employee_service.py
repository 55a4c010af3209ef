"""
Service layer for employee records.

``EmployeeService`` mediates between the API handlers and an
``EmployeeRepository``.  It adds no business rules of its own: lookups
of unknown ids return ``None`` rather than raising, and updates
overwrite name, department and salary wholesale while keeping the id.

The update is a read followed by a write with no lock in between, so
a concurrent delete of the same id can be undone by the update.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from employee_api.app.models.employee import Employee
from employee_api.app.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


SAMPLE_EMPLOYEES = (
    Employee(name="Alice", department="HR", salary=60000),
    Employee(name="Bob", department="Engineering", salary=75000),
    Employee(name="Charlie", department="Marketing", salary=50000),
)


class EmployeeService:
    """Service class for managing employee records."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def get_all_employees(self) -> List[Employee]:
        return self.repository.find_all()

    async def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee or ``None`` if the id is unknown."""
        return self.repository.find_by_id(employee_id)

    async def add_employee(self, employee: Employee) -> Employee:
        """Store a new employee and return it with its assigned id."""
        saved = self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    async def update_employee(self, employee_id: int, new_values: Employee) -> Optional[Employee]:
        """Overwrite all mutable fields of an existing employee.

        Returns the updated record, or ``None`` without writing anything
        if no employee has ``employee_id``.  Any id carried by
        ``new_values`` is ignored.
        """
        existing = self.repository.find_by_id(employee_id)
        if existing is None:
            return None
        updated = replace(
            existing,
            name=new_values.name,
            department=new_values.department,
            salary=new_values.salary,
        )
        saved = self.repository.save(updated)
        logger.info("Updated employee %s", employee_id)
        return saved

    async def delete_employee(self, employee_id: int) -> None:
        """Delete an employee; unknown ids are ignored."""
        self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)


async def seed_sample_employees(service: EmployeeService) -> List[Employee]:
    """Add the three sample employees.

    Not idempotent: every call appends three new rows.
    """
    created = [await service.add_employee(replace(sample)) for sample in SAMPLE_EMPLOYEES]
    logger.info("Seeded %d sample employees", len(created))
    return created
