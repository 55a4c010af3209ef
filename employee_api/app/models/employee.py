"""
Domain model for employee records.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """
    A single employee record.

    Attributes:
        name: Employee name; no format is enforced.
        department: Free-text department name.
        salary: Salary amount, non-negative by convention only.
        id: Primary key assigned by the repository (None for new records).
    """
    name: Optional[str] = None
    department: Optional[str] = None
    salary: float = 0.0
    id: Optional[int] = None
