"""
Pydantic models for employee data.

``EmployeeBase`` carries the three mutable fields.  Every field has a
default: a body that omits a field produces ``null`` for text fields
and ``0`` for the salary, and an update with such a body overwrites
the stored value with that default.  Incoming ``id`` values are
ignored; ids are always assigned by the repository.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EmployeeBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Alice"])
    department: Optional[str] = Field(None, examples=["HR"])
    salary: float = Field(0.0, examples=[60000])


class EmployeeCreate(EmployeeBase):
    """Schema for adding an employee."""
    pass


class EmployeeUpdate(EmployeeBase):
    """Schema for overwriting an employee.

    Unlike most update payloads, fields are not optional patches: all
    three are written back, defaults included.
    """
    pass


class EmployeeRead(EmployeeBase):
    """Schema for reading an employee from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
