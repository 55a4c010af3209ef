"""
API dependencies.

The employee service is built once by ``create_app`` and attached to
``app.state``.  Handlers receive it through ``get_employee_service``,
which keeps them free of construction details and lets tests swap in
a service over another repository.
"""

from fastapi import Request

from employee_api.app.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    """Return the service attached to the running application."""
    return request.app.state.employee_service
