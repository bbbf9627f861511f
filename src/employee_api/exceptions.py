"""Domain exceptions for employee operations.

Raised by repositories and services; handlers translate them into
HTTP responses.

Hierarchy:
    EmployeeAPIError (base)
    ├── InvalidEmployeeIdError  -> 400 Bad Request
    ├── EmployeeNotFoundError   -> 404 Not Found
    └── EmployeeStoreError      -> 500 Internal Server Error
"""


class EmployeeAPIError(Exception):
    """Base exception for all employee service errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidEmployeeIdError(EmployeeAPIError):
    """Raised when an identifier is not in the store's native id format."""

    def __init__(self, employee_id: str, reason: str | None = None) -> None:
        self.employee_id = employee_id
        super().__init__(reason or f"'{employee_id}' is not a valid employee id")


class EmployeeNotFoundError(EmployeeAPIError):
    """Raised when no record matches the given identifier."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee '{employee_id}' not found")


class EmployeeStoreError(EmployeeAPIError):
    """Raised for any other store failure (network, serialization, internal)."""
