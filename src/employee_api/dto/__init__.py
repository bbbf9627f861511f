"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .requests import EmployeeRequest
from .responses import DeleteEmployeeResponse, EmployeeResponse, HealthCheckResponse

__all__ = [
    "EmployeeRequest",
    "EmployeeResponse",
    "DeleteEmployeeResponse",
    "HealthCheckResponse",
]
