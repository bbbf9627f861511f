"""Service layer for business logic.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from employee_api.services import EmployeeService

    service = EmployeeService.create(repository=repo)
    ```
"""

from .employee_service import EmployeeService

__all__ = [
    "EmployeeService",
]
