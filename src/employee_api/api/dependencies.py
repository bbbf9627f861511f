"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - The MongoDB client is created once in the lifespan
    - Repository, service and handler are built on top of it and stored in app.state
    - Dependency functions retrieve from request.app.state
    - No global mutable connection state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from pymongo.errors import PyMongoError

from employee_api.config import configure_logging, get_mongo_client, settings
from employee_api.handlers import EmployeeHandler
from employee_api.protocols import EmployeeStore
from employee_api.repositories import MongoEmployeeRepository
from employee_api.services import EmployeeService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> EmployeeHandler:
    """Dependency injection for EmployeeHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "employee_handler", None)
    if handler is None:
        raise RuntimeError("EmployeeHandler not initialized. Check lifespan setup.")
    return handler


def install_services(app: FastAPI, repository: EmployeeStore) -> None:
    """Build the service and handler on top of a repository and store them in app.state."""
    employee_service = EmployeeService.create(repository=repository)
    app.state.repository = repository
    app.state.employee_service = employee_service
    app.state.employee_handler = EmployeeHandler(employee_service=employee_service)


def remove_services(app: FastAPI) -> None:
    """Remove everything install_services put in app.state."""
    del app.state.employee_handler
    del app.state.employee_service
    del app.state.repository


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for the MongoDB-backed app.

    Startup:
    1. Create the MongoDB client and verify it with a ping
       (bounded by settings.mongo_timeout_ms; failure aborts startup)
    2. Build repository, service and handler into app.state

    Shutdown:
        Removes services from app.state and closes the client.
    """
    configure_logging()
    logger.info("Connecting to MongoDB %s (database %s)", settings.mongo_uri, settings.mongo_db_name)
    client = get_mongo_client()
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        client.close()
        raise

    app.state.mongo_client = client
    install_services(app, MongoEmployeeRepository.create(client))
    logger.info("Employee service initialized (collection %s)", settings.mongo_collection)

    yield

    remove_services(app)
    del app.state.mongo_client
    client.close()
    logger.info("Employee service shut down")


def repository_lifespan(
    repository: EmployeeStore,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build a lifespan that serves a pre-built repository instead of MongoDB."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        install_services(app, repository)
        yield
        remove_services(app)

    return _lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[EmployeeHandler, Depends(get_handler)]
