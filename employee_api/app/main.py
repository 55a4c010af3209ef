"""
Main entrypoint for the Employee Records API.

This module assembles the FastAPI application, sets up logging, wires
the repository into the service and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn employee_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .repositories.employee_repository import EmployeeRepository, SQLiteEmployeeRepository
from .services.employee_service import EmployeeService, seed_sample_employees

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[EmployeeRepository] = None,
    seed_sample_data: Optional[bool] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[EmployeeRepository]
        Storage backend for the employee service.  Defaults to the
        SQLite repository at ``settings.database_url``, whose schema is
        migrated on startup.
    seed_sample_data : Optional[bool]
        Whether to insert the sample employees on startup.  Defaults
        to ``settings.seed_sample_data``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging()

    if seed_sample_data is None:
        seed_sample_data = settings.seed_sample_data

    database_url = settings.database_url
    migrate = repository is None
    if repository is None:
        repository = SQLiteEmployeeRepository(database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if migrate:
            # Creates the database file if it does not exist and brings
            # the schema up to date.
            init_db(database_url)
        if seed_sample_data:
            await seed_sample_employees(app.state.employee_service)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.employee_service = EmployeeService(repository)

    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
