"""
Data access layer for employee records.

``EmployeeRepository`` is the storage contract used by the service
layer.  ``SQLiteEmployeeRepository`` keeps records in the ``employees``
table; ``InMemoryEmployeeRepository`` keeps them in a dict keyed by id.
Neither implementation locks or versions records: concurrent writers
race and the last write wins.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, List, Optional

from employee_api.app.core.db import get_connection
from employee_api.app.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository(ABC):
    """Storage contract for employee records."""

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert ``employee`` if it has no id, otherwise overwrite it.

        Returns the stored record with ``id`` populated.
        """
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> List[Employee]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the record or ``None`` if no record has that id."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the record; deleting an unknown id is a no-op."""
        raise NotImplementedError


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict-backed repository.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice even after its record is deleted.  Records are
    copied on the way in and out.
    """

    def __init__(self) -> None:
        self._records: Dict[int, Employee] = {}
        self._next_id = 1

    def save(self, employee: Employee) -> Employee:
        if employee.id is None:
            employee_id = self._next_id
        else:
            employee_id = employee.id
        # Keep the counter ahead of explicitly supplied ids too.
        self._next_id = max(self._next_id, employee_id + 1)
        stored = replace(employee, id=employee_id)
        self._records[employee_id] = stored
        return replace(stored)

    def find_all(self) -> List[Employee]:
        return [replace(record) for _, record in sorted(self._records.items())]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        record = self._records.get(employee_id)
        return replace(record) if record is not None else None

    def delete_by_id(self, employee_id: int) -> None:
        self._records.pop(employee_id, None)


class SQLiteEmployeeRepository(EmployeeRepository):
    """Repository backed by the ``employees`` table.

    Every call opens its own connection and closes it before returning.
    The schema must already exist; see ``core.db.init_db``.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def save(self, employee: Employee) -> Employee:
        conn = get_connection(self.database_url)
        try:
            cursor = conn.cursor()
            if employee.id is None:
                cursor.execute(
                    "INSERT INTO employees (name, department, salary) VALUES (?, ?, ?)",
                    (employee.name, employee.department, employee.salary),
                )
                employee_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO employees (id, name, department, salary)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        department = excluded.department,
                        salary = excluded.salary
                    """,
                    (employee.id, employee.name, employee.department, employee.salary),
                )
                employee_id = employee.id
            conn.commit()
            logger.debug("Saved employee row %s", employee_id)
            return replace(employee, id=employee_id)
        finally:
            conn.close()

    def find_all(self) -> List[Employee]:
        conn = get_connection(self.database_url)
        try:
            rows = conn.execute(
                "SELECT id, name, department, salary FROM employees ORDER BY id"
            ).fetchall()
            return [self._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        conn = get_connection(self.database_url)
        try:
            row = conn.execute(
                "SELECT id, name, department, salary FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
            return self._row_to_employee(row) if row else None
        finally:
            conn.close()

    def delete_by_id(self, employee_id: int) -> None:
        conn = get_connection(self.database_url)
        try:
            conn.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> Employee:
        return Employee(
            id=row["id"],
            name=row["name"],
            department=row["department"],
            salary=row["salary"],
        )
