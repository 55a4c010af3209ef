"""
Domain models.

Plain dataclasses passed between the repositories and the service
layer.  API payloads are described separately by the pydantic schemas
in ``schemas``.
"""

from .employee import Employee

__all__ = ["Employee"]
