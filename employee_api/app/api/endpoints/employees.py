"""
Employee endpoints.

Every route answers GET; ``add`` and ``update`` read a JSON body even
on GET and also accept the conventional write verbs.  Looking up or
updating an unknown id yields an empty 200 response unless
``STRICT_NOT_FOUND`` is enabled, in which case a 404 is returned.
Deletion always answers with a plain-text confirmation, whether or not
the id existed.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from fastapi.responses import PlainTextResponse

from employee_api.app.api.dependencies import get_employee_service
from employee_api.app.core.config import settings
from employee_api.app.models.employee import Employee
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()

# Ids are stored as SQLite INTEGER, a signed 64-bit value.
MIN_EMPLOYEE_ID = -(2**63)
MAX_EMPLOYEE_ID = 2**63 - 1


def _not_found() -> Response:
    """Return an empty 200 that bypasses ``response_model``, or raise 404 in strict mode."""
    if settings.strict_not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return Response(status_code=status.HTTP_200_OK)


@router.get("/all", response_model=List[EmployeeRead])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeRead]:
    """Return every stored employee ordered by id."""
    employees = await service.get_all_employees()
    return [EmployeeRead.model_validate(employee) for employee in employees]


@router.get("/get/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> Union[EmployeeRead, Response]:
    """Retrieve a single employee by ID."""
    employee = await service.get_employee_by_id(employee_id)
    if employee is None:
        return _not_found()
    return EmployeeRead.model_validate(employee)


@router.api_route("/add", methods=["GET", "POST"], response_model=EmployeeRead)
async def add_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Add an employee and return it with its assigned ID."""
    employee = await service.add_employee(Employee(**employee_in.model_dump()))
    return EmployeeRead.model_validate(employee)


@router.api_route("/update/{employee_id}", methods=["GET", "POST", "PUT"], response_model=EmployeeRead)
async def update_employee(
    employee_in: EmployeeUpdate,
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> Union[EmployeeRead, Response]:
    """Overwrite name, department and salary of an existing employee."""
    employee = await service.update_employee(employee_id, Employee(**employee_in.model_dump()))
    if employee is None:
        return _not_found()
    return EmployeeRead.model_validate(employee)


@router.api_route("/delete/{employee_id}", methods=["GET", "DELETE"], response_class=PlainTextResponse)
async def delete_employee(
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    """Delete an employee and confirm with a text message."""
    await service.delete_employee(employee_id)
    return f"Employee deleted with ID: {employee_id}"
