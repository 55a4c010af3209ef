"""
Top-level API router.

Aggregates the domain routers under their fixed prefixes.  When a new
domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
