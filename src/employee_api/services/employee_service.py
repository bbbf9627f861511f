"""Employee service for core business logic.

Each operation issues one logical store operation. Create is the
exception in physical terms: insert followed by a read-back of the
new record so callers get exactly what was persisted.
"""

import logging

from employee_api.entities import EmployeeEntity, EmployeeUpdate
from employee_api.exceptions import EmployeeNotFoundError, EmployeeStoreError
from employee_api.protocols import EmployeeStore

logger = logging.getLogger(__name__)


class EmployeeService:
    """CRUD orchestration over an EmployeeStore.

    This service depends on the EmployeeStore PROTOCOL, not on MongoDB,
    so any backend (or an in-memory fake in tests) can be injected.

    Example:
        ```python
        from employee_api.config import get_mongo_client
        from employee_api.repositories import MongoEmployeeRepository
        from employee_api.services import EmployeeService

        client = get_mongo_client()
        service = EmployeeService.create(
            repository=MongoEmployeeRepository.create(client),
        )
        ```
    """

    def __init__(self, repository: EmployeeStore) -> None:
        """Initialize the employee service.

        Args:
            repository: Employee storage backend (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: EmployeeStore) -> "EmployeeService":
        """Factory method to create EmployeeService."""
        return cls(repository=repository)

    def list_employees(self) -> list[EmployeeEntity]:
        """Return all employees in store order (empty list if none)."""
        return self._repository.find_all()

    def create_employee(self, employee: EmployeeUpdate) -> EmployeeEntity:
        """Insert an employee and return the persisted copy.

        Business logic:
        1. Insert the field values; the store assigns the id
        2. Re-read the record by that id
        3. Return the stored record, not the caller's input

        Raises:
            EmployeeStoreError: If the insert fails or the record cannot be read back
        """
        employee_id = self._repository.insert(employee)

        created = self._repository.find_by_id(employee_id)
        if created is None:
            raise EmployeeStoreError(f"Inserted employee '{employee_id}' could not be read back")

        logger.info("Created employee %s", employee_id)
        return created

    def update_employee(self, employee_id: str, employee: EmployeeUpdate) -> EmployeeEntity:
        """Overwrite name, salary and age of an existing employee.

        Returns:
            The path id with the new field values

        Raises:
            InvalidEmployeeIdError: If the id is not in the store's format
            EmployeeNotFoundError: If no record has this id
        """
        if not self._repository.update(employee_id, employee):
            raise EmployeeNotFoundError(employee_id)

        logger.info("Updated employee %s", employee_id)
        return employee.with_id(employee_id)

    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee.

        Raises:
            InvalidEmployeeIdError: If the id is not in the store's format
            EmployeeNotFoundError: If nothing was deleted
        """
        if self._repository.delete(employee_id) < 1:
            raise EmployeeNotFoundError(employee_id)

        logger.info("Deleted employee %s", employee_id)

    def count(self) -> int:
        """Number of stored employees."""
        return self._repository.count_all()

    def is_healthy(self) -> bool:
        """Check if the store is reachable."""
        return self._repository.health_check()

    @property
    def repository(self) -> EmployeeStore:
        """Get the underlying repository (for testing)."""
        return self._repository
