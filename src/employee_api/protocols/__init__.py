"""Protocol interfaces for swappable implementations.

Usage:
    ```python
    from employee_api.protocols import EmployeeStore

    store: EmployeeStore = MongoEmployeeRepository.create(client)
    ```
"""

from .employee_store import EmployeeStore

__all__ = [
    "EmployeeStore",
]
