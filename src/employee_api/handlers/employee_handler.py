"""HTTP handlers for employee operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
Service calls go through the threadpool because the store driver blocks.
"""

from fastapi import HTTPException, status
from fastapi.concurrency import run_in_threadpool

from employee_api.dto import (
    DeleteEmployeeResponse,
    EmployeeRequest,
    EmployeeResponse,
    HealthCheckResponse,
)
from employee_api.exceptions import (
    EmployeeNotFoundError,
    EmployeeStoreError,
    InvalidEmployeeIdError,
)
from employee_api.services import EmployeeService


class EmployeeHandler:
    """HTTP handlers for employee CRUD.

    This handler delegates business logic to EmployeeService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping domain errors to status codes (400, 404, 500)

    Example:
        ```python
        handler = EmployeeHandler(employee_service=service)

        @app.get("/employee", response_model=list[EmployeeResponse])
        async def list_employees():
            return await handler.list_employees()
        ```
    """

    def __init__(self, employee_service: EmployeeService) -> None:
        """Initialize the employee handler.

        Args:
            employee_service: The employee service for business logic (required).
        """
        self._employees = employee_service

    async def list_employees(self) -> list[EmployeeResponse]:
        """Handle GET /employee requests.

        Raises:
            HTTPException: 500 if the store cannot be read
        """
        try:
            employees = await run_in_threadpool(self._employees.list_employees)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return [EmployeeResponse.from_entity(employee) for employee in employees]

    async def create_employee(self, request: EmployeeRequest) -> EmployeeResponse:
        """Handle POST /employee requests.

        Any ``id`` in the request body is dropped before insertion.

        Raises:
            HTTPException: 500 if the insert or read-back fails
        """
        try:
            created = await run_in_threadpool(self._employees.create_employee, request.to_update())
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return EmployeeResponse.from_entity(created)

    async def update_employee(self, employee_id: str, request: EmployeeRequest) -> EmployeeResponse:
        """Handle PUT /employee/{id} requests.

        Raises:
            HTTPException: 400 for a malformed id, 404 if no record matches,
                500 for any other store failure
        """
        try:
            updated = await run_in_threadpool(
                self._employees.update_employee, employee_id, request.to_update()
            )
        except InvalidEmployeeIdError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
        except EmployeeNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return EmployeeResponse.from_entity(updated)

    async def delete_employee(self, employee_id: str) -> DeleteEmployeeResponse:
        """Handle DELETE /employee/{id} requests.

        Raises:
            HTTPException: 400 for a malformed id, 404 if nothing was deleted,
                500 for any other store failure
        """
        try:
            await run_in_threadpool(self._employees.delete_employee, employee_id)
        except InvalidEmployeeIdError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
        except EmployeeNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return DeleteEmployeeResponse(
            success=True,
            id=employee_id,
            message="record deleted!",
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the database is unreachable
        """
        if not await run_in_threadpool(self._employees.is_healthy):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database connection failed",
            )

        try:
            total = await run_in_threadpool(self._employees.count)
        except EmployeeStoreError:
            total = None

        return HealthCheckResponse(
            status="healthy",
            database="connected",
            total_employees=total,
        )
