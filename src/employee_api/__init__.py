"""Employee API - CRUD over employee records stored in MongoDB.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (EmployeeStore)
    - repositories: Data access implementations (MongoDB)
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from employee_api.config import get_mongo_client
    from employee_api.repositories import MongoEmployeeRepository
    from employee_api.services import EmployeeService

    service = EmployeeService.create(
        repository=MongoEmployeeRepository.create(get_mongo_client()),
    )
    ```

For HTTP API:
    ```python
    from employee_api.api.app import app
    ```
"""

from employee_api.config import get_mongo_client, settings
from employee_api.dto import DeleteEmployeeResponse, EmployeeRequest, EmployeeResponse
from employee_api.entities import EmployeeEntity, EmployeeUpdate
from employee_api.exceptions import (
    EmployeeAPIError,
    EmployeeNotFoundError,
    EmployeeStoreError,
    InvalidEmployeeIdError,
)
from employee_api.handlers import EmployeeHandler
from employee_api.protocols import EmployeeStore
from employee_api.repositories import MongoEmployeeRepository
from employee_api.services import EmployeeService

__all__ = [
    # Configuration
    "settings",
    "get_mongo_client",
    # Protocols (interfaces)
    "EmployeeStore",
    # Services (business logic)
    "EmployeeService",
    # Handlers (HTTP)
    "EmployeeHandler",
    # Repositories (data access)
    "MongoEmployeeRepository",
    # Entities (domain models)
    "EmployeeEntity",
    "EmployeeUpdate",
    # DTOs (API contracts)
    "EmployeeRequest",
    "EmployeeResponse",
    "DeleteEmployeeResponse",
    # Errors
    "EmployeeAPIError",
    "InvalidEmployeeIdError",
    "EmployeeNotFoundError",
    "EmployeeStoreError",
]
