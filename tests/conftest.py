# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Environment variables are set before any application import, because
# employee_api.app.core.config reads them once at import time.
# =============================================================================

import os
import tempfile

os.environ.setdefault(
    "DATABASE_URL", os.path.join(tempfile.mkdtemp(prefix="employee-api-"), "test.db")
)
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("STRICT_NOT_FOUND", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.db import init_db
from employee_api.app.main import create_app
from employee_api.app.repositories.employee_repository import (
    InMemoryEmployeeRepository,
    SQLiteEmployeeRepository,
)
from employee_api.app.services.employee_service import EmployeeService


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def memory_repository():
    """Empty dict-backed repository."""
    return InMemoryEmployeeRepository()


@pytest.fixture
def database_path(tmp_path):
    """Path of a freshly migrated SQLite database."""
    path = str(tmp_path / "employees.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_repository(database_path):
    """Repository over an empty, migrated SQLite database."""
    return SQLiteEmployeeRepository(database_path)


@pytest.fixture(params=["memory", "sqlite"])
def repository(request):
    """Each repository implementation in turn."""
    if request.param == "memory":
        return request.getfixturevalue("memory_repository")
    return request.getfixturevalue("sqlite_repository")


@pytest.fixture
def service(memory_repository):
    return EmployeeService(memory_repository)


@pytest.fixture
def client(memory_repository):
    """Test client for an app with an empty store and no seeding."""
    app = create_app(repository=memory_repository, seed_sample_data=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice():
    return {"name": "Alice", "department": "HR", "salary": 60000}
