"""
Data access layer.

Repositories hide the storage backend behind ``save``/``find_all``/
``find_by_id``/``delete_by_id``.  The SQLite implementation is used by
the running service; the in-memory one backs tests and ad-hoc runs.
"""

from .employee_repository import (
    EmployeeRepository,
    InMemoryEmployeeRepository,
    SQLiteEmployeeRepository,
)

__all__ = [
    "EmployeeRepository",
    "InMemoryEmployeeRepository",
    "SQLiteEmployeeRepository",
]
