"""Repository layer for data access.

This layer hides the document database behind the EmployeeStore
protocol, so services can be tested with in-memory implementations.
"""

from employee_api.protocols import EmployeeStore

from .mongo_repository import MongoEmployeeRepository

__all__ = [
    "EmployeeStore",
    "MongoEmployeeRepository",
]
